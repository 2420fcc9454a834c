"""Confirmation screens for EVM transactions in a wallet."""

from .viewmodels import SendEvmTransactionViewModel
from .services import SendEvmTransactionServiceBase
from .adapters import EvmCoinServiceFactory, TransactionInfoAddressMapper, parse_decoration
from .schemas import SectionViewItem, ValueType
from .i18n import Translator
from .config import Settings, load_settings

__all__ = [
    "SendEvmTransactionViewModel",
    "SendEvmTransactionServiceBase",
    "EvmCoinServiceFactory",
    "TransactionInfoAddressMapper",
    "parse_decoration",
    "SectionViewItem",
    "ValueType",
    "Translator",
    "Settings",
    "load_settings",
]
