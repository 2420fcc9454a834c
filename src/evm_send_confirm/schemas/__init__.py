from .bases import FrozenModel, to_eip55, to_hex
from .view_items import (
    ValueType,
    SubheadViewItem,
    ValueViewItem,
    AddressViewItem,
    InputViewItem,
    ViewItem,
    SectionViewItem,
)
from .transactions import TransactionData, SendInfo, SwapInfo, AdditionalInfo

__all__ = [
    "FrozenModel",
    "to_eip55",
    "to_hex",
    "ValueType",
    "SubheadViewItem",
    "ValueViewItem",
    "AddressViewItem",
    "InputViewItem",
    "ViewItem",
    "SectionViewItem",
    "TransactionData",
    "SendInfo",
    "SwapInfo",
    "AdditionalInfo",
]
