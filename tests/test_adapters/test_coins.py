"""
Coin Service Test Suite

Tests for amount formatting, the chain registry and coin resolution.

Usage:
    pytest tests/test_adapters/test_coins.py -v
"""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from evm_send_confirm.adapters.address_mapper import TransactionInfoAddressMapper
from evm_send_confirm.adapters.coins import Coin, CoinService, Currency, EvmCoinServiceFactory
from evm_send_confirm.adapters.evm.constants import (
    get_chain_config,
    normalize_caip2,
    value_to_decimal,
)
from evm_send_confirm.engine.exceptions import ConfigurationError

USDC_MAINNET = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
CUSTOM_TOKEN = "0x" + "34" * 20

ETH = Coin(title="Ethereum", code="ETH", decimals=18)
USDC = Coin(title="USD Coin", code="USDC", decimals=6, contract_address=USDC_MAINNET)


class TestCoinService:
    """Amount formatting for a single coin."""

    @pytest.mark.parametrize("coin,value,expected", [
        (ETH, 10**18, "1 ETH"),
        (ETH, 15 * 10**17, "1.5 ETH"),
        (ETH, 0, "0 ETH"),
        (ETH, 1, "0.000000000000000001 ETH"),
        (USDC, 1_500_000, "1.5 USDC"),
        (USDC, 1_250_500_000, "1,250.5 USDC"),
        (USDC, 1_990_000_000, "1,990 USDC"),
    ])
    def test_amount_data(self, coin, value, expected):
        assert CoinService(coin).amount_data(value).get_formatted() == expected

    def test_amount_data_from_amount(self):
        assert CoinService(USDC).amount_data_from_amount(Decimal("2000.5")).get_formatted() == "2,000.5 USDC"

    def test_fiat_equivalent(self):
        service = CoinService(ETH, rate=Decimal("2000"))
        assert service.amount_data(15 * 10**17).get_formatted() == "1.5 ETH | $3,000.00"

    def test_fiat_in_other_currency(self):
        service = CoinService(ETH, rate=Decimal("1850.255"), currency=Currency(code="EUR", symbol="€"))
        assert service.amount_data(10**18).get_formatted() == "1 ETH | €1,850.26"

    def test_coin_value_has_no_fiat(self):
        service = CoinService(ETH, rate=Decimal("2000"))
        assert service.coin_value(10**18).get_formatted() == "1 ETH"


class TestChainRegistry:

    @pytest.mark.parametrize("caip2,expected", [
        ("eip155:1", "eip155:1"),
        ("eip155-137", "eip155:137"),
        (" eip155:8453 ", "eip155:8453"),
        ("eip155:0010", "eip155:10"),
    ])
    def test_normalize_caip2(self, caip2, expected):
        assert normalize_caip2(caip2) == expected

    @pytest.mark.parametrize("caip2", ["", None, "solana:1", "eip155:abc", "eip155:0", "eip155:1:2", "eip155:-1"])
    def test_normalize_caip2_rejects_invalid(self, caip2):
        with pytest.raises(ValueError):
            normalize_caip2(caip2)

    def test_unknown_chain_is_none(self):
        assert get_chain_config("eip155:999999") is None

    def test_find_asset_is_case_insensitive(self):
        config = get_chain_config("eip155:1")
        assert config.find_asset(USDC_MAINNET.lower()).symbol == "USDC"
        assert config.find_asset(CUSTOM_TOKEN) is None

    def test_value_to_decimal(self):
        assert value_to_decimal(value=1_500_000, decimals=6) == Decimal("1.5")

    @pytest.mark.parametrize("value", [-1, 1.5, "100"])
    def test_value_to_decimal_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            value_to_decimal(value=value, decimals=6)


class TestEvmCoinServiceFactory:
    """Coin resolution by contract address."""

    def test_base_coin(self):
        factory = EvmCoinServiceFactory.from_caip2("eip155:137")
        assert factory.base_coin_service.coin.code == "MATIC"

    def test_registry_token(self):
        factory = EvmCoinServiceFactory.from_caip2("eip155:1")
        service = factory.get_coin_service(USDC_MAINNET.lower())
        assert service.coin.title == "USD Coin"
        assert service.coin.decimals == 6

    def test_unknown_token_is_none(self):
        factory = EvmCoinServiceFactory.from_caip2("eip155:1")
        assert factory.get_coin_service(CUSTOM_TOKEN) is None

    def test_registered_token(self):
        factory = EvmCoinServiceFactory.from_caip2("eip155:1")
        factory.register_coin(Coin(title="Custom", code="CST", decimals=8, contract_address=CUSTOM_TOKEN))

        assert factory.get_coin_service(CUSTOM_TOKEN.upper().replace("0X", "0x")).coin.code == "CST"

    def test_register_requires_contract(self):
        factory = EvmCoinServiceFactory.from_caip2("eip155:1")
        with pytest.raises(ValueError):
            factory.register_coin(ETH)

    def test_rates_apply_by_code(self):
        factory = EvmCoinServiceFactory.from_caip2("eip155:1", rates={"usdc": Decimal("1")})
        service = factory.get_coin_service(USDC_MAINNET)
        assert service.amount_data(1_500_000).get_formatted() == "1.5 USDC | $1.50"
        assert factory.base_coin_service.rate is None

    @pytest.mark.parametrize("caip2", ["eip155:999999", "bitcoin:1"])
    def test_unsupported_chain(self, caip2):
        with pytest.raises(ConfigurationError):
            EvmCoinServiceFactory.from_caip2(caip2)


class TestAddressMapper:

    def test_known_router(self):
        assert TransactionInfoAddressMapper.map("0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D") == "Uniswap v.2"

    def test_unknown_address_maps_to_itself(self):
        assert TransactionInfoAddressMapper.map(CUSTOM_TOKEN) == CUSTOM_TOKEN

    def test_register_and_unregister(self):
        TransactionInfoAddressMapper.register(CUSTOM_TOKEN, " Treasury ")
        try:
            assert TransactionInfoAddressMapper.map(CUSTOM_TOKEN.upper().replace("0X", "0x")) == "Treasury"
        finally:
            TransactionInfoAddressMapper.unregister(CUSTOM_TOKEN)
        assert TransactionInfoAddressMapper.map(CUSTOM_TOKEN) == CUSTOM_TOKEN

    def test_register_rejects_blank_label(self):
        with pytest.raises(ValueError):
            TransactionInfoAddressMapper.register(CUSTOM_TOKEN, "  ")
