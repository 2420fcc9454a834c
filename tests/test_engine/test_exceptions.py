"""
Exception Conversion Test Suite

Tests for the exception hierarchy and the conversion of raw RPC failures into
typed EVM errors.

Usage:
    pytest tests/test_engine/test_exceptions.py -v
"""

import sys
from pathlib import Path

import pytest
from web3.exceptions import ContractLogicError

src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from evm_send_confirm.engine.exceptions import (
    BaseException as ProjectBaseException,
    ConfigurationError,
    EvmError,
    ExecutionRevertedError,
    InsufficientBalanceError,
    InsufficientBalanceWithFeeError,
    LowerThanBaseGasLimitError,
    NonceAlreadyInBlockError,
    ReplacementTransactionUnderpricedError,
    RpcError,
    TransactionError,
    convert_error,
    rpc_error_message,
)


class TestHierarchy:

    @pytest.mark.parametrize("error_class", [
        TransactionError,
        EvmError,
        ConfigurationError,
        InsufficientBalanceWithFeeError,
        LowerThanBaseGasLimitError,
    ])
    def test_project_errors_share_root(self, error_class):
        assert issubclass(error_class, ProjectBaseException)

    def test_insufficient_balance_keeps_required_amount(self):
        error = InsufficientBalanceError(required_balance=42)
        assert error.required_balance == 42
        assert isinstance(error, TransactionError)

    def test_rpc_error_fields(self):
        error = RpcError(-32000, "nonce too low", data={"nonce": 7})
        assert error.code == -32000
        assert error.message == "nonce too low"
        assert error.data == {"nonce": 7}
        assert str(error) == "nonce too low"

    def test_execution_reverted_default_message(self):
        assert str(ExecutionRevertedError()) == "execution reverted"


class TestConvertError:
    """Node messages are matched case-insensitively."""

    @pytest.mark.parametrize("message,expected", [
        ("insufficient funds for transfer", InsufficientBalanceWithFeeError),
        ("insufficient funds for gas * price + value", InsufficientBalanceWithFeeError),
        ("gas required exceeds allowance (21000)", InsufficientBalanceWithFeeError),
        ("execution reverted: Ownable: caller is not the owner", ExecutionRevertedError),
        ("max fee per gas less than block base fee", LowerThanBaseGasLimitError),
        ("Nonce too low", NonceAlreadyInBlockError),
        ("replacement transaction underpriced", ReplacementTransactionUnderpricedError),
    ])
    def test_rpc_messages(self, message, expected):
        converted = convert_error(RpcError(-32000, message))
        assert isinstance(converted, expected)
        assert str(converted) == message

    def test_web3_value_error_payload(self):
        error = ValueError({"code": -32000, "message": "insufficient funds for transfer"})
        assert isinstance(convert_error(error), InsufficientBalanceWithFeeError)

    def test_contract_logic_error(self):
        assert isinstance(convert_error(ContractLogicError("execution reverted: STF")), ExecutionRevertedError)

    def test_unrecognized_rpc_message_is_unchanged(self):
        error = RpcError(-32601, "method not found")
        assert convert_error(error) is error


class TestRpcErrorMessage:

    @pytest.mark.parametrize("error,expected", [
        (RpcError(-32601, "method not found"), "method not found"),
        (ValueError({"code": -32000, "message": "weird"}), "weird"),
        (ValueError({"code": -32000, "message": 7}), None),
        (ValueError({"code": -32000}), None),
        (ValueError("plain value error"), None),
        (RuntimeError("socket closed"), None),
    ])
    def test_extracts_node_message(self, error, expected):
        assert rpc_error_message(error) == expected

    @pytest.mark.parametrize("error", [
        RuntimeError("socket closed"),
        ValueError("plain value error"),
        ValueError({"code": -32000}),
        InsufficientBalanceError(required_balance=1),
    ])
    def test_other_errors_are_unchanged(self, error):
        assert convert_error(error) is error
