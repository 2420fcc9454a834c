"""
Transaction Data Schemas

Raw transaction data as produced by the preparation service and the
out-of-band enrichment that travels with it.

Classes:
    - TransactionData: destination, native value and calldata of a transaction
    - SendInfo: enrichment for plain and token transfers (resolved domain)
    - SwapInfo: enrichment for swaps (estimates, slippage, price, ...)
    - AdditionalInfo: optional container for the two above
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer, field_validator

from .bases import FrozenModel, to_eip55, to_hex, to_input_bytes


class TransactionData(FrozenModel):
    """
    Transaction payload ready for signing.

    Attributes:
        to: Destination address, normalized to EIP-55 on construction.
        value: Native coin value in wei.
        input: Calldata bytes. Accepts bytes or a hex string.

    Example::

        tx = TransactionData(
            to="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            value=0,
            input="0xa9059cbb...",
        )
        tx.to          # '0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48'
        tx.input_hex   # '0xa9059cbb...'
    """

    to: str = Field(..., description="Destination address (EIP-55)")
    value: int = Field(default=0, ge=0, description="Native value in wei")
    input: bytes = Field(default=b"", description="Calldata")

    @field_validator("to", mode="before")
    @classmethod
    def _checksum_to(cls, value: str) -> str:
        return to_eip55(value)

    @field_validator("input", mode="before")
    @classmethod
    def _coerce_input(cls, value) -> bytes:
        return to_input_bytes(value)

    @field_serializer("input")
    def _serialize_input(self, value: bytes) -> str:
        return to_hex(value)

    @property
    def input_hex(self) -> str:
        return to_hex(self.input)


class SendInfo(FrozenModel):
    domain: Optional[str] = Field(default=None, description="Resolved name of the recipient (ENS, UD, ...)")


class SwapInfo(FrozenModel):
    """
    Swap enrichment computed by the trade service before the confirmation screen.

    The estimates are human-readable amounts (not smallest units). All string
    fields are already formatted for display.
    """

    estimated_out: Optional[Decimal] = Field(default=None, description="Estimated output amount (exact-in trades)")
    estimated_in: Optional[Decimal] = Field(default=None, description="Estimated input amount (exact-out trades)")
    slippage: Optional[str] = None
    deadline: Optional[str] = None
    recipient_domain: Optional[str] = None
    price: Optional[str] = None
    price_impact: Optional[str] = None


class AdditionalInfo(FrozenModel):
    send_info: Optional[SendInfo] = None
    swap_info: Optional[SwapInfo] = None
