"""
States published by a transaction preparation service.

Three independent enumerations, each delivered on its own channel:
    - State: whether the prepared transaction can be sent (Ready / NotReady)
    - DataState[TxDataState]: loading envelope around the decoded transaction
    - SendState: lifecycle of a send attempt (Idle / Sending / Sent / Failed)

States hold exceptions, so they are plain frozen dataclasses rather than
Pydantic models.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar, Union

from ..adapters.evm.decorations import ContractMethodDecoration
from .transactions import AdditionalInfo, TransactionData

T = TypeVar("T")


# -----------------------------
# Readiness
# -----------------------------

@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class NotReady:
    """Not sendable. ``errors`` holds the reasons, most relevant first; may be empty while loading."""
    errors: List[Exception] = field(default_factory=list)


State = Union[Ready, NotReady]


# -----------------------------
# Data envelope
# -----------------------------

@dataclass(frozen=True)
class Loading:
    @property
    def data_or_none(self) -> None:
        return None


@dataclass(frozen=True)
class Error:
    error: Exception

    @property
    def data_or_none(self) -> None:
        return None


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T

    @property
    def data_or_none(self) -> T:
        return self.data


DataState = Union[Loading, Error, Success[T]]


@dataclass(frozen=True)
class TxDataState:
    """
    Decoded transaction snapshot.

    Attributes:
        transaction_data: Raw transaction, None until gas estimation built it.
        additional_info: Out-of-band enrichment (domains, swap estimates).
        decoration: Classified calldata, None when the decoder has no result.
    """
    transaction_data: Optional[TransactionData] = None
    additional_info: Optional[AdditionalInfo] = None
    decoration: Optional[ContractMethodDecoration] = None


# -----------------------------
# Send lifecycle
# -----------------------------

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Sending:
    pass


@dataclass(frozen=True)
class Sent:
    transaction_hash: bytes


@dataclass(frozen=True)
class Failed:
    error: Exception


SendState = Union[Idle, Sending, Sent, Failed]
