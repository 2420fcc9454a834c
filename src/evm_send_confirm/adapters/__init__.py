from .bases import CoinServiceBase, CoinServiceFactoryBase
from .coins import Coin, Currency, CoinValue, CurrencyValue, AmountData, CoinService, EvmCoinServiceFactory
from .address_mapper import TransactionInfoAddressMapper
from .unions import DecorationTypes, parse_decoration

__all__ = [
    "CoinServiceBase",
    "CoinServiceFactoryBase",
    "Coin",
    "Currency",
    "CoinValue",
    "CurrencyValue",
    "AmountData",
    "CoinService",
    "EvmCoinServiceFactory",
    "TransactionInfoAddressMapper",
    "DecorationTypes",
    "parse_decoration",
]
