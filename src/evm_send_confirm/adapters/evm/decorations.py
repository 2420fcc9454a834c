"""
EVM Contract Method Decorations

Pydantic models for the classified shape of a transaction's calldata. The
decoder that produces them lives outside this package; these models are the
read-only contract between that decoder and the confirmation view model.

Decoration classes:
    - TransferMethodDecoration: ERC-20 ``transfer(to, value)``
    - ApproveMethodDecoration: ERC-20 ``approve(spender, value)``
    - SwapMethodDecoration: Uniswap-style router swap
    - RecognizedMethodDecoration: known method signature without a dedicated screen
    - UnknownMethodDecoration: calldata that could not be matched

Swap supporting classes:
    - ExactInTrade / ExactOutTrade: the two trade directions (``trade_type``)
    - EvmCoinToken / Eip20CoinToken: native coin or ERC-20 token (``token_type``)

All address fields are normalized to EIP-55 on construction.
"""

from typing import Any, List, Literal, Union

from pydantic import Field, field_validator
from typing_extensions import Annotated

from ...schemas.bases import FrozenModel, to_eip55


class ContractMethodDecoration(FrozenModel):
    """
    Base class of every decoration.

    Subclasses outside the closed set below are valid decorations but have no
    confirmation layout; the view model treats them as unsupported.
    """

    decoration_type: str = Field(..., description="Decoration discriminator")


class TransferMethodDecoration(ContractMethodDecoration):
    decoration_type: Literal["transfer"] = "transfer"
    to: str = Field(..., description="Token recipient")
    value: int = Field(..., ge=0, description="Token amount in smallest units")

    @field_validator("to", mode="before")
    @classmethod
    def _checksum(cls, value: str) -> str:
        return to_eip55(value)


class ApproveMethodDecoration(ContractMethodDecoration):
    decoration_type: Literal["approve"] = "approve"
    spender: str = Field(..., description="Address allowed to spend")
    value: int = Field(..., ge=0, description="Allowance in smallest units")

    @field_validator("spender", mode="before")
    @classmethod
    def _checksum(cls, value: str) -> str:
        return to_eip55(value)


# -----------------------------
# Swap trade and token variants
# -----------------------------

class ExactInTrade(FrozenModel):
    """Sell exactly ``amount_in``, receive at least ``amount_out_min``."""
    trade_type: Literal["exact_in"] = "exact_in"
    amount_in: int = Field(..., ge=0)
    amount_out_min: int = Field(..., ge=0)


class ExactOutTrade(FrozenModel):
    """Receive exactly ``amount_out``, pay at most ``amount_in_max``."""
    trade_type: Literal["exact_out"] = "exact_out"
    amount_out: int = Field(..., ge=0)
    amount_in_max: int = Field(..., ge=0)


class EvmCoinToken(FrozenModel):
    """The chain's native coin (ETH, MATIC, ...)."""
    token_type: Literal["evm_coin"] = "evm_coin"


class Eip20CoinToken(FrozenModel):
    token_type: Literal["eip20"] = "eip20"
    address: str = Field(..., description="ERC-20 contract address")

    @field_validator("address", mode="before")
    @classmethod
    def _checksum(cls, value: str) -> str:
        return to_eip55(value)


TradeTypes = Annotated[
    Union[
        ExactInTrade,   # trade_type: "exact_in"
        ExactOutTrade,  # trade_type: "exact_out"
    ],
    Field(discriminator="trade_type")
]

SwapTokenTypes = Annotated[
    Union[
        EvmCoinToken,    # token_type: "evm_coin"
        Eip20CoinToken,  # token_type: "eip20"
    ],
    Field(discriminator="token_type")
]


class SwapMethodDecoration(ContractMethodDecoration):
    """
    Router swap decoded from calldata.

    Attributes:
        trade: Exact-in or exact-out trade amounts.
        token_in: Token sold.
        token_out: Token bought.
        to: Recipient of ``token_out``.
        deadline: Unix timestamp after which the router rejects the swap.
    """

    decoration_type: Literal["swap"] = "swap"
    trade: TradeTypes
    token_in: SwapTokenTypes
    token_out: SwapTokenTypes
    to: str
    deadline: int = Field(..., ge=0)

    @field_validator("to", mode="before")
    @classmethod
    def _checksum(cls, value: str) -> str:
        return to_eip55(value)


class RecognizedMethodDecoration(ContractMethodDecoration):
    decoration_type: Literal["recognized"] = "recognized"
    method: str = Field(..., description="Method name, e.g. 'deposit'")
    arguments: List[Any] = Field(default_factory=list)


class UnknownMethodDecoration(ContractMethodDecoration):
    decoration_type: Literal["unknown"] = "unknown"
