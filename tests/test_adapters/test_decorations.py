"""
Decoration and Schema Test Suite

Tests for the discriminated decoration union, transaction data normalization
and the view item schemas.

Usage:
    pytest tests/test_adapters/test_decorations.py -v
"""

import sys
from pathlib import Path

import pytest
from pydantic import TypeAdapter, ValidationError

src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from evm_send_confirm.adapters.evm.decorations import (
    ApproveMethodDecoration,
    Eip20CoinToken,
    EvmCoinToken,
    ExactOutTrade,
    RecognizedMethodDecoration,
    SwapMethodDecoration,
    TransferMethodDecoration,
    UnknownMethodDecoration,
)
from evm_send_confirm.adapters.unions import parse_decoration
from evm_send_confirm.engine.events import SendSuccessEvent
from evm_send_confirm.schemas.transactions import TransactionData
from evm_send_confirm.schemas.view_items import (
    AddressViewItem,
    InputViewItem,
    SectionViewItem,
    ValueType,
    ValueViewItem,
)

USDC_LOWER = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
USDC_EIP55 = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


class TestParseDecoration:
    """The decoration_type field selects the concrete model."""

    def test_transfer(self):
        decoration = parse_decoration({"decoration_type": "transfer", "to": USDC_LOWER, "value": 5})
        assert isinstance(decoration, TransferMethodDecoration)
        assert decoration.to == USDC_EIP55

    def test_approve_from_json(self):
        decoration = parse_decoration(
            '{"decoration_type": "approve", "spender": "%s", "value": 1000}' % USDC_LOWER
        )
        assert isinstance(decoration, ApproveMethodDecoration)
        assert decoration.value == 1000

    def test_swap_with_nested_unions(self):
        decoration = parse_decoration({
            "decoration_type": "swap",
            "trade": {"trade_type": "exact_out", "amount_out": 10, "amount_in_max": 20},
            "token_in": {"token_type": "evm_coin"},
            "token_out": {"token_type": "eip20", "address": USDC_LOWER},
            "to": USDC_LOWER,
            "deadline": 1_900_000_000,
        })

        assert isinstance(decoration, SwapMethodDecoration)
        assert isinstance(decoration.trade, ExactOutTrade)
        assert isinstance(decoration.token_in, EvmCoinToken)
        assert decoration.token_out == Eip20CoinToken(address=USDC_EIP55)

    def test_recognized_and_unknown(self):
        recognized = parse_decoration({"decoration_type": "recognized", "method": "deposit"})
        assert isinstance(recognized, RecognizedMethodDecoration)
        assert recognized.arguments == []
        assert isinstance(parse_decoration({"decoration_type": "unknown"}), UnknownMethodDecoration)

    def test_dump_and_parse_back(self):
        original = TransferMethodDecoration(to=USDC_LOWER, value=7)
        assert parse_decoration(original.model_dump()) == original

    @pytest.mark.parametrize("payload", [
        {"decoration_type": "mint"},
        {"decoration_type": "transfer", "to": "0x1234", "value": 1},
        {"decoration_type": "transfer", "to": USDC_LOWER, "value": -1},
    ])
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValidationError):
            parse_decoration(payload)

    def test_decorations_are_immutable(self):
        decoration = TransferMethodDecoration(to=USDC_LOWER, value=7)
        with pytest.raises(ValidationError):
            decoration.value = 8


class TestTransactionData:

    def test_normalizes_address_and_input(self):
        tx = TransactionData(to=USDC_LOWER, value=1, input="0xA9059CBB")
        assert tx.to == USDC_EIP55
        assert tx.input == bytes.fromhex("a9059cbb")
        assert tx.input_hex == "0xa9059cbb"

    def test_empty_input(self):
        assert TransactionData(to=USDC_LOWER).input_hex == "0x"

    def test_serializes_input_as_hex(self):
        tx = TransactionData(to=USDC_LOWER, input=b"\xd0\xe3\r\xb0")
        assert tx.model_dump()["input"] == "0xd0e30db0"

    @pytest.mark.parametrize("fields", [
        {"to": "not-an-address"},
        {"to": USDC_LOWER, "value": -1},
    ])
    def test_rejects_invalid(self, fields):
        with pytest.raises(ValidationError):
            TransactionData(**fields)


class TestViewItems:

    def test_section_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            SectionViewItem(view_items=[])

    def test_rows_parse_by_item_type(self):
        section = TypeAdapter(SectionViewItem).validate_python({"view_items": [
            {"item_type": "value", "title": "Amount", "value": "1 ETH", "value_type": "outgoing"},
            {"item_type": "address", "title": "To", "value_title": "alice.eth", "value": USDC_EIP55},
            {"item_type": "input", "value": "0x"},
        ]})

        assert section.view_items == [
            ValueViewItem(title="Amount", value="1 ETH", value_type=ValueType.OUTGOING),
            AddressViewItem(title="To", value_title="alice.eth", value=USDC_EIP55),
            InputViewItem(value="0x"),
        ]


class TestEvents:

    def test_success_event_hex(self):
        event = SendSuccessEvent(transaction_hash=b"\xab\xcd")
        assert event.transaction_hash_hex == "0xabcd"
        assert repr(event) == "SendSuccessEvent(transaction_hash=0xabcd)"
