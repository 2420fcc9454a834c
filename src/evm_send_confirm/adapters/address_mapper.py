"""
Known-contract labels for address rows.

Maps well-known contract addresses (DEX routers, aggregators) to a readable
name. Unknown addresses map to themselves.
"""

from typing import Dict


class TransactionInfoAddressMapper:
    """
    Address -> display label lookup.

    Lookups are case-insensitive. Additional labels can be registered at
    runtime, e.g. from a wallet's address book.

    Example:
        TransactionInfoAddressMapper.map("0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D")
        # -> "Uniswap v.2"
    """

    _labels: Dict[str, str] = {
        "0x7a250d5630b4cf539739df2c5dacb4c659f2488d": "Uniswap v.2",
        "0xe592427a0aece92de3edee1f18e0157c05861564": "Uniswap v.3",
        "0x68b3465833fb72a70ecdf485e0e4c7bd8665fc45": "Uniswap v.3",
        "0xd9e1ce17f2641f24ae83637ab66a2cca9c378b9f": "SushiSwap",
        "0x1111111254fb6c44bac0bed2854e76f90643097d": "1inch",
        "0x1111111254eeb25477b68fb85ed929f73a960582": "1inch",
        "0x10ed43c718714eb63d5aa57b78b54704e256024e": "PancakeSwap",
        "0xdef1c0ded9bec7f1a1670819833240f027b25eff": "0x Exchange",
    }

    @classmethod
    def map(cls, address: str) -> str:
        return cls._labels.get(address.lower(), address)

    @classmethod
    def register(cls, address: str, label: str) -> None:
        if not label or not label.strip():
            raise ValueError("label must be a non-empty string")
        cls._labels[address.lower()] = label.strip()

    @classmethod
    def unregister(cls, address: str) -> None:
        cls._labels.pop(address.lower(), None)
