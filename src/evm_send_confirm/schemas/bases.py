"""
Base Schema Models for the EVM Send Confirmation System

This module defines the base class that all schema models inherit from,
together with the address and calldata normalisation shared by the
transaction and decoration models.

Core Classes:
    - FrozenModel: Immutable Pydantic base model for display rows and decoded data

Helpers:
    - to_eip55: Checksum an EVM address (EIP-55)
    - to_hex: Hex-encode calldata with a 0x prefix

Dependencies:
    - pydantic: For data validation and serialization
    - web3 / eth_utils: For checksum addresses and hex encoding
"""

from typing import Union

from eth_utils import encode_hex, to_bytes
from pydantic import BaseModel, ConfigDict
from web3 import Web3


class FrozenModel(BaseModel):
    """Immutable model. Assignment after creation raises a ValidationError."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


def to_eip55(address: str) -> str:
    """
    Return the EIP-55 mixed-case checksum form of ``address``.

    Args:
        address: 0x-prefixed, 40 hex character address in any letter case.

    Returns:
        str: Checksummed address.

    Raises:
        ValueError: If ``address`` is not a 20-byte hex address.
    """
    if not isinstance(address, str):
        raise ValueError(f"Address must be a string, got {type(address).__name__}")
    candidate = address.strip()
    if not Web3.is_address(candidate):
        raise ValueError(f"Invalid EVM address: {address!r}")
    return Web3.to_checksum_address(candidate)


def to_input_bytes(data: Union[bytes, bytearray, str, None]) -> bytes:
    """Coerce calldata given as bytes or a hex string (0x prefix optional) to bytes."""
    if data is None:
        return b""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        hexstr = data.strip()
        if hexstr in ("", "0x", "0X"):
            return b""
        try:
            return to_bytes(hexstr=hexstr)
        except ValueError as e:
            raise ValueError(f"Invalid hex calldata: {data!r}") from e
    raise ValueError(f"Calldata must be bytes or hex string, got {type(data).__name__}")


def to_hex(data: bytes) -> str:
    """Hex-encode calldata with a 0x prefix. Empty calldata encodes as ``"0x"``."""
    return encode_hex(data)
