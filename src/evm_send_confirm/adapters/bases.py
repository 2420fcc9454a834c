"""
Abstract Base Classes for Coin Adapters

Defines the interfaces the confirmation view model relies on for amount
formatting. Concrete implementations live in ``adapters.coins``; tests and
host applications may provide their own.

Core Classes:
    - CoinServiceBase: amount formatting for one coin
    - CoinServiceFactoryBase: resolves a contract address to its coin service
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .coins import AmountData, Coin, CoinValue


class CoinServiceBase(ABC):
    """
    Amount formatting and conversion for a single coin.

    Key Responsibilities:
    1. coin: metadata used for titles and error messages (title, code, decimals)
    2. amount_data: smallest-unit value -> display amount (coin + optional fiat)
    3. amount_data_from_amount: human-readable Decimal -> display amount
    4. coin_value: smallest-unit value -> coin-only display amount
    """

    @property
    @abstractmethod
    def coin(self) -> "Coin":
        pass

    @abstractmethod
    def amount_data(self, value: int) -> "AmountData":
        """
        Build display data for a smallest-unit integer value.

        Args:
            value: Amount in the coin's smallest unit (wei for ETH).

        Returns:
            AmountData whose ``get_formatted()`` is ready for display.
        """
        pass

    @abstractmethod
    def amount_data_from_amount(self, amount: Decimal) -> "AmountData":
        """Build display data for an already human-readable amount."""
        pass

    @abstractmethod
    def coin_value(self, value: int) -> "CoinValue":
        """Coin-only display value for a smallest-unit integer value."""
        pass


class CoinServiceFactoryBase(ABC):
    """
    Resolves coin services for the chain the wallet is operating on.

    Example Implementation:
        class EvmCoinServiceFactory(CoinServiceFactoryBase):
            # Looks assets up in the static chain registry
            pass
    """

    @property
    @abstractmethod
    def base_coin_service(self) -> CoinServiceBase:
        """Coin service of the chain's native coin."""
        pass

    @abstractmethod
    def get_coin_service(self, contract_address: str) -> Optional[CoinServiceBase]:
        """
        Resolve the coin service of an ERC-20 contract.

        Args:
            contract_address: Token contract address in any letter case.

        Returns:
            The coin service, or None when the token is unknown to the wallet.
            Implementations must not raise for unknown or malformed addresses.
        """
        pass
