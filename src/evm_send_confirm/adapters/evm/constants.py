"""
EVM Chain Configuration

Static registry of supported EVM chains: each chain's native currency and the
ERC-20 assets the wallet knows how to display, plus the conversion of
smallest-unit integer values into display amounts.
"""

from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, Field


class EvmAssetConfig(BaseModel):
    """Token asset configuration."""
    symbol: str
    address: str = Field(..., description="Token contract address")
    name: str = Field(..., description="Token name")
    decimals: int = Field(..., ge=0, description="Token decimals")


class EvmNativeCurrency(BaseModel):
    """Native coin of a chain (pays for gas)."""
    symbol: str
    name: str
    decimals: int = Field(default=18, ge=0)


class EvmChainConfig(BaseModel):
    """EVM blockchain network configuration."""
    caip2: str
    name: str
    native_currency: EvmNativeCurrency
    assets: Dict[str, EvmAssetConfig] = Field(default_factory=dict, description="Displayable ERC-20 assets")

    def find_asset(self, address: str) -> Optional[EvmAssetConfig]:
        """Return the asset whose contract is ``address`` (case-insensitive), or None."""
        if not isinstance(address, str):
            return None
        needle = address.strip().lower()
        for asset in self.assets.values():
            if asset.address.lower() == needle:
                return asset
        return None


_USDC = "USD Coin"
_USDT = "Tether USD"

# Raw chain configuration data keyed by CAIP-2 identifier; assets keyed by symbol.
_EVM_CHAINS_DATA: Dict[str, dict] = {
    "eip155:1": {
        "name": "Ethereum Mainnet",
        "native_currency": {"symbol": "ETH", "name": "Ethereum"},
        "assets": {
            "USDC": {"address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", "name": _USDC, "decimals": 6},
            "USDT": {"address": "0xdAC17F958D2ee523a2206206994597C13D831ec7", "name": _USDT, "decimals": 6},
            "DAI": {"address": "0x6B175474E89094C44Da98b954EedeAC495271d0F", "name": "Dai Stablecoin", "decimals": 18},
            "WETH": {"address": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", "name": "Wrapped Ether", "decimals": 18},
        },
    },
    "eip155:8453": {
        "name": "Base Mainnet",
        "native_currency": {"symbol": "ETH", "name": "Ethereum"},
        "assets": {
            "USDC": {"address": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913", "name": _USDC, "decimals": 6},
            "USDT": {"address": "0xfde4C96256153236af98292015BA95836c75af0a", "name": _USDT, "decimals": 6},
        },
    },
    "eip155:137": {
        "name": "Polygon Mainnet",
        "native_currency": {"symbol": "MATIC", "name": "Polygon"},
        "assets": {
            "USDC": {"address": "0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359", "name": _USDC, "decimals": 6},
            "USDT": {"address": "0xc2132D05D31c914a87C6611C10748AEb04B58e8F", "name": _USDT, "decimals": 6},
        },
    },
    "eip155:11155111": {
        "name": "Sepolia Testnet",
        "native_currency": {"symbol": "ETH", "name": "Sepolia Ether"},
        "assets": {
            "USDC": {"address": "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238", "name": _USDC, "decimals": 6},
        },
    },
}


def get_chain_config(caip2: str) -> Optional[EvmChainConfig]:
    """
    Get the configuration of a supported chain.

    Args:
        caip2: Chain identifier such as ``eip155:1`` (``eip155-1`` is accepted too).

    Returns:
        EvmChainConfig, or None if the chain is not in the registry.

    Raises:
        ValueError: If ``caip2`` is not an eip155 identifier.
    """
    key = normalize_caip2(caip2)
    raw = _EVM_CHAINS_DATA.get(key)
    if raw is None:
        return None

    return EvmChainConfig(
        caip2=key,
        name=raw["name"],
        native_currency=EvmNativeCurrency(**raw["native_currency"]),
        assets={symbol: EvmAssetConfig(symbol=symbol, **asset) for symbol, asset in raw["assets"].items()},
    )


def normalize_caip2(caip2: str) -> str:
    """
    Canonical ``eip155:<id>`` form of a chain identifier.

    Surrounding whitespace is ignored and a hyphen separator is accepted, so
    ``" eip155-137 "`` becomes ``"eip155:137"``.

    Raises:
        ValueError: If the namespace is not eip155 or the id is not a positive integer.
    """
    text = caip2.strip().replace("-", ":", 1) if isinstance(caip2, str) else ""
    namespace, _, reference = text.partition(":")
    if namespace != "eip155" or not reference.isdigit() or int(reference) == 0:
        raise ValueError(f"Invalid chain identifier {caip2!r}, expected 'eip155:<chain_id>'")
    return f"eip155:{int(reference)}"


def value_to_decimal(*, value: int, decimals: int) -> Decimal:
    """
    Smallest-unit integer to an exact display amount (``1_500_000``, 6 -> ``Decimal("1.5")``).

    Raises:
        ValueError: If ``value`` is negative or not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"value must be an integer in smallest units, got {value!r}")
    if value < 0:
        raise ValueError("value must be non-negative")
    return Decimal(value).scaleb(-decimals)
