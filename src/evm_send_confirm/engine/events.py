"""
Send lifecycle events published by the confirmation view model.

Events carry their own data; the view decides how to present them (progress
indicator, success screen, error toast).
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from ..schemas.bases import to_hex


# ==================== Base Event ====================

class BaseEvent(ABC):
    """Base class for all events in the system."""

    @abstractmethod
    def __repr__(self) -> str:
        """String representation of the event."""
        pass


# ==================== Send Lifecycle Events ====================

class SendingEvent(BaseModel, BaseEvent):
    """The transaction was handed to the node; the send button is disabled."""

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "SendingEvent()"


class SendSuccessEvent(BaseModel, BaseEvent):
    """Result: the node accepted the transaction."""
    transaction_hash: bytes

    model_config = ConfigDict(frozen=True)

    @property
    def transaction_hash_hex(self) -> str:
        return to_hex(self.transaction_hash)

    def __repr__(self) -> str:
        return f"SendSuccessEvent(transaction_hash={self.transaction_hash_hex})"


class SendFailedEvent(BaseModel, BaseEvent):
    """Result: sending failed; ``error_message`` is localized and ready for display."""
    error_message: str

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"SendFailedEvent(error={self.error_message})"
