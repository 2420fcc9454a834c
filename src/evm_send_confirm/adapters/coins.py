"""
Coin Services

Concrete amount formatting for native coins and ERC-20 tokens on a single EVM
chain, backed by the static chain registry in ``adapters.evm.constants``.

Classes:
    - Coin / Currency: coin and fiat currency metadata
    - CoinValue / CurrencyValue: an amount bound to its coin or currency
    - AmountData: coin amount with optional fiat equivalent
    - CoinService: formatting for one coin, optional fiat rate
    - EvmCoinServiceFactory: resolves coin services by contract address
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Mapping, Optional

from pydantic import Field

from ..engine.exceptions import ConfigurationError
from ..schemas.bases import FrozenModel
from .bases import CoinServiceBase, CoinServiceFactoryBase
from .evm.constants import EvmChainConfig, get_chain_config, value_to_decimal

logger = logging.getLogger(__name__)


class Coin(FrozenModel):
    """
    Coin metadata.

    Attributes:
        title: Display name (e.g. "Ethereum", "USD Coin").
        code: Ticker (e.g. "ETH", "USDC").
        decimals: Smallest-unit exponent.
        contract_address: ERC-20 contract, None for the native coin.
    """
    title: str
    code: str
    decimals: int = Field(..., ge=0)
    contract_address: Optional[str] = None


class Currency(FrozenModel):
    code: str = "USD"
    symbol: str = "$"
    decimals: int = Field(default=2, ge=0)


def _format_decimal(amount: Decimal, fraction_digits: Optional[int] = None) -> str:
    """Group thousands and strip trailing zeros; quantize when ``fraction_digits`` is set."""
    with localcontext() as ctx:
        ctx.prec = 80
        if fraction_digits is not None:
            amount = amount.quantize(Decimal(1).scaleb(-fraction_digits), rounding=ROUND_HALF_UP)
            return f"{amount:,.{fraction_digits}f}"
        normalized = amount.normalize()
        if normalized == 0:
            return "0"
        return f"{normalized:,f}"


class CoinValue(FrozenModel):
    coin: Coin
    value: Decimal

    def get_formatted(self) -> str:
        """Amount followed by the coin code, e.g. ``"1,250.5 USDC"``."""
        return f"{_format_decimal(self.value)} {self.coin.code}"


class CurrencyValue(FrozenModel):
    currency: Currency
    value: Decimal

    def get_formatted(self) -> str:
        return f"{self.currency.symbol}{_format_decimal(self.value, self.currency.decimals)}"


class AmountData(FrozenModel):
    """Coin amount with an optional fiat equivalent."""
    primary: CoinValue
    secondary: Optional[CurrencyValue] = None

    def get_formatted(self) -> str:
        """``"1.5 ETH"`` or ``"1.5 ETH | $3,000.00"`` when a fiat rate is known."""
        text = self.primary.get_formatted()
        if self.secondary is not None:
            text += f" | {self.secondary.get_formatted()}"
        return text


class CoinService(CoinServiceBase):
    """
    Amount formatting for one coin.

    Args:
        coin: Coin metadata.
        rate: Optional fiat price of one whole coin.
        currency: Fiat currency of ``rate``.

    Example:
        service = CoinService(Coin(title="Ethereum", code="ETH", decimals=18))
        service.amount_data(1_500_000_000_000_000_000).get_formatted()  # "1.5 ETH"
    """

    def __init__(self, coin: Coin, rate: Optional[Decimal] = None, currency: Optional[Currency] = None):
        self._coin = coin
        self._rate = Decimal(str(rate)) if rate is not None else None
        self._currency = currency or Currency()

    @property
    def coin(self) -> Coin:
        return self._coin

    @property
    def rate(self) -> Optional[Decimal]:
        return self._rate

    def amount_data(self, value: int) -> AmountData:
        return self.amount_data_from_amount(value_to_decimal(value=value, decimals=self._coin.decimals))

    def amount_data_from_amount(self, amount: Decimal) -> AmountData:
        amount = Decimal(str(amount))
        secondary = None
        if self._rate is not None:
            secondary = CurrencyValue(currency=self._currency, value=amount * self._rate)
        return AmountData(primary=CoinValue(coin=self._coin, value=amount), secondary=secondary)

    def coin_value(self, value: int) -> CoinValue:
        return CoinValue(coin=self._coin, value=value_to_decimal(value=value, decimals=self._coin.decimals))

    def __repr__(self) -> str:
        return f"CoinService(coin={self._coin.code})"


class EvmCoinServiceFactory(CoinServiceFactoryBase):
    """
    Coin services for one EVM chain.

    Tokens are resolved from the chain registry first and then from coins
    registered at runtime with :meth:`register_coin` (user-added tokens).

    Args:
        chain_config: Chain the wallet is operating on.
        rates: Optional fiat rates keyed by coin code (e.g. ``{"ETH": Decimal("2000")}``).
        currency: Fiat currency of ``rates``.
    """

    def __init__(
        self,
        chain_config: EvmChainConfig,
        rates: Optional[Mapping[str, Decimal]] = None,
        currency: Optional[Currency] = None,
    ):
        self._chain = chain_config
        self._rates: Dict[str, Decimal] = {code.upper(): Decimal(str(rate)) for code, rate in (rates or {}).items()}
        self._currency = currency or Currency()
        self._custom_coins: Dict[str, Coin] = {}

        native = chain_config.native_currency
        self._base_coin_service = self._create(
            Coin(title=native.name, code=native.symbol, decimals=native.decimals)
        )

    @classmethod
    def from_caip2(cls, caip2: str, **kwargs) -> "EvmCoinServiceFactory":
        """
        Build a factory for a chain of the registry.

        Raises:
            ConfigurationError: If the identifier is malformed or the chain unsupported.
        """
        try:
            config = get_chain_config(caip2)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        if config is None:
            raise ConfigurationError(f"Unsupported chain_id {caip2}, expected CAIP-2 format eg: 'eip155:1'")
        return cls(config, **kwargs)

    @property
    def chain(self) -> EvmChainConfig:
        return self._chain

    @property
    def base_coin_service(self) -> CoinService:
        return self._base_coin_service

    def register_coin(self, coin: Coin) -> None:
        """Make a token outside the chain registry resolvable."""
        if not coin.contract_address:
            raise ValueError("Only ERC-20 coins with a contract_address can be registered")
        self._custom_coins[coin.contract_address.lower()] = coin

    def get_coin_service(self, contract_address: str) -> Optional[CoinService]:
        if not isinstance(contract_address, str):
            return None

        asset = self._chain.find_asset(contract_address)
        if asset is not None:
            coin = Coin(title=asset.name, code=asset.symbol, decimals=asset.decimals, contract_address=asset.address)
            return self._create(coin)

        coin = self._custom_coins.get(contract_address.strip().lower())
        if coin is not None:
            return self._create(coin)

        logger.debug("No coin registered for contract %s on %s", contract_address, self._chain.caip2)
        return None

    def _create(self, coin: Coin) -> CoinService:
        return CoinService(coin, rate=self._rates.get(coin.code.upper()), currency=self._currency)
