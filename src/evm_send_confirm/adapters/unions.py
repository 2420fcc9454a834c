"""
Decoration Polymorphic Types (Discriminated Unions)

Defines the type union that automatically discriminates between the decoration
variants using the ``decoration_type`` field.

Pydantic's Discriminated Union automatically:
- Validates and selects the correct model based on the discriminator field value
- Provides type safety and IDE autocomplete for all variants
- Eliminates the need for manual type detection and conversion logic

To add a new decoration:
1. Define the model in adapters/evm/decorations.py
2. Add it to the Union below
3. Teach the view model how to render it

Example usage:
    decoration = parse_decoration({
        "decoration_type": "approve",
        "spender": "0x...",
        "value": 1000,
    })
    # -> ApproveMethodDecoration
"""

from typing import Any, Dict, Union

from pydantic import Field, TypeAdapter
from typing_extensions import Annotated

from .evm.decorations import (
    ApproveMethodDecoration,
    RecognizedMethodDecoration,
    SwapMethodDecoration,
    TransferMethodDecoration,
    UnknownMethodDecoration,
)


DecorationTypes = Annotated[
    Union[
        TransferMethodDecoration,    # decoration_type: "transfer"
        ApproveMethodDecoration,     # decoration_type: "approve"
        SwapMethodDecoration,        # decoration_type: "swap"
        RecognizedMethodDecoration,  # decoration_type: "recognized"
        UnknownMethodDecoration,     # decoration_type: "unknown"
    ],
    Field(discriminator="decoration_type")
]

_decoration_adapter = TypeAdapter(DecorationTypes)


def parse_decoration(data: Union[Dict[str, Any], str]) -> DecorationTypes:
    """
    Build a decoration from a plain dict or a JSON string.

    Args:
        data: Mapping or JSON document carrying a ``decoration_type`` field.

    Returns:
        The concrete decoration model selected by ``decoration_type``.

    Raises:
        pydantic.ValidationError: If the discriminator is unknown or fields are invalid.
    """
    if isinstance(data, str):
        return _decoration_adapter.validate_json(data)
    return _decoration_adapter.validate_python(data)
