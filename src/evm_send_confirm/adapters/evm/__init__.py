from .decorations import (
    ContractMethodDecoration,
    TransferMethodDecoration,
    ApproveMethodDecoration,
    SwapMethodDecoration,
    RecognizedMethodDecoration,
    UnknownMethodDecoration,
    ExactInTrade,
    ExactOutTrade,
    EvmCoinToken,
    Eip20CoinToken,
)
from .constants import (
    EvmAssetConfig,
    EvmNativeCurrency,
    EvmChainConfig,
    get_chain_config,
    normalize_caip2,
    value_to_decimal,
)

__all__ = [
    "ContractMethodDecoration",
    "TransferMethodDecoration",
    "ApproveMethodDecoration",
    "SwapMethodDecoration",
    "RecognizedMethodDecoration",
    "UnknownMethodDecoration",
    "ExactInTrade",
    "ExactOutTrade",
    "EvmCoinToken",
    "Eip20CoinToken",
    "EvmAssetConfig",
    "EvmNativeCurrency",
    "EvmChainConfig",
    "get_chain_config",
    "normalize_caip2",
    "value_to_decimal",
]
