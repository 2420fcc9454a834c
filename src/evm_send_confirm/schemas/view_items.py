"""
Confirmation Screen View Items

Display rows rendered on the send confirmation screen. Every row is an
immutable Pydantic model; the ``item_type`` field is the discriminator so
serialized sections can be parsed back into the correct variant.

Row variants:
    - SubheadViewItem: Section header with a title and a value (e.g. coin title)
    - ValueViewItem: Title/value pair with a ValueType rendering hint
    - AddressViewItem: Address row with a display label and the raw address
    - InputViewItem: Raw calldata as 0x-prefixed hex
"""

from enum import Enum
from typing import List, Literal, Union

from pydantic import Field, field_validator
from typing_extensions import Annotated

from .bases import FrozenModel


class ValueType(str, Enum):
    """Rendering hint for a value row (e.g. text color)."""
    REGULAR = "regular"
    DISABLED = "disabled"
    OUTGOING = "outgoing"
    INCOMING = "incoming"


class SubheadViewItem(FrozenModel):
    item_type: Literal["subhead"] = "subhead"
    title: str
    value: str


class ValueViewItem(FrozenModel):
    item_type: Literal["value"] = "value"
    title: str
    value: str
    value_type: ValueType = ValueType.REGULAR


class AddressViewItem(FrozenModel):
    """
    Address row.

    Attributes:
        title: Row title (e.g. "To", "Spender").
        value_title: Label shown to the user; a domain, a known contract name
            or the address itself.
        value: Raw EIP-55 address.
    """
    item_type: Literal["address"] = "address"
    title: str
    value_title: str
    value: str


class InputViewItem(FrozenModel):
    item_type: Literal["input"] = "input"
    value: str = Field(..., description="Calldata as 0x-prefixed hex")


# Discriminated union over all row variants
ViewItem = Annotated[
    Union[
        SubheadViewItem,  # item_type: "subhead"
        ValueViewItem,    # item_type: "value"
        AddressViewItem,  # item_type: "address"
        InputViewItem,    # item_type: "input"
    ],
    Field(discriminator="item_type")
]


class SectionViewItem(FrozenModel):
    """Ordered, non-empty group of rows rendered as one card."""

    view_items: List[ViewItem]

    @field_validator("view_items")
    @classmethod
    def _not_empty(cls, value: List[ViewItem]) -> List[ViewItem]:
        if not value:
            raise ValueError("A section must contain at least one view item")
        return value
