"""
Exception and Error Definitions Module

Defines the exception hierarchy for transaction preparation and sending, and
the conversion of raw JSON-RPC failures into typed EVM errors. All exceptions
inherit from BaseException for unified exception handling.

Exception Hierarchy:
    BaseException (root)
    ├── TransactionError
    │   └── InsufficientBalanceError
    ├── EvmError
    │   ├── InsufficientBalanceWithFeeError
    │   ├── ExecutionRevertedError
    │   ├── LowerThanBaseGasLimitError
    │   ├── NonceAlreadyInBlockError
    │   └── ReplacementTransactionUnderpricedError
    ├── RpcError
    └── ConfigurationError
"""

from typing import Any, Optional

from web3.exceptions import ContractLogicError


class BaseException(Exception):
    """
    Root exception class for all project-specific exceptions.

    All custom exceptions should inherit from this class to enable
    unified exception handling and centralized error processing.
    """
    pass


class TransactionError(BaseException):
    """
    Base exception for errors detected while preparing a transaction.

    Raised (or reported through the readiness state) before anything is sent.
    """
    pass


class InsufficientBalanceError(TransactionError):
    """
    Raised when the native balance cannot cover value plus fee.

    Attributes:
        required_balance: Total native amount needed, in wei
    """

    def __init__(self, required_balance: int, message: Optional[str] = None):
        self.required_balance = required_balance
        super().__init__(message or f"Insufficient balance, required {required_balance} wei")


class EvmError(BaseException):
    """
    Base exception for typed failures reported by an EVM node.

    Produced by :func:`convert_error` from raw RPC failures.
    """
    pass


class InsufficientBalanceWithFeeError(EvmError):
    """
    Raised when the node rejects a transaction because the account cannot pay
    for gas on top of the transferred value.
    """
    pass


class ExecutionRevertedError(EvmError):
    """
    Raised when gas estimation or execution reverted inside the contract.

    Attributes:
        reason: Revert message returned by the node, if any
    """

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        super().__init__(reason or "execution reverted")


class LowerThanBaseGasLimitError(EvmError):
    """Raised when the max fee per gas is below the current block base fee."""
    pass


class NonceAlreadyInBlockError(EvmError):
    """Raised when the transaction nonce was already used by a mined transaction."""
    pass


class ReplacementTransactionUnderpricedError(EvmError):
    """Raised when a pending transaction is replaced with too low a gas price."""
    pass


class RpcError(BaseException):
    """
    Raw JSON-RPC error response.

    Attributes:
        code: JSON-RPC error code
        message: Error message reported by the node
        data: Optional error data payload
    """

    def __init__(self, code: int, message: str, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(message)


class ConfigurationError(BaseException):
    """
    Raised when configuration is missing or invalid.

    This includes scenarios such as:
    - Unsupported network configuration
    - Invalid log level or locale values
    """
    pass


def rpc_error_message(error: Exception) -> Optional[str]:
    """Node message of an RPC failure (``RpcError`` or web3's ``ValueError({...})``), None otherwise."""
    if isinstance(error, RpcError):
        return error.message
    # web3.py raises ValueError({"code": ..., "message": ...}) for RPC error responses
    if isinstance(error, ValueError) and error.args and isinstance(error.args[0], dict):
        message = error.args[0].get("message")
        return message if isinstance(message, str) else None
    return None


def convert_error(error: Exception) -> Exception:
    """
    Convert a raw RPC failure into a typed :class:`EvmError`.

    Errors that are not RPC failures, or whose message is not recognized, are
    returned unchanged.

    Args:
        error: Any exception raised while estimating or sending a transaction.

    Returns:
        The typed EVM error, or ``error`` itself.

    Example:
        >>> convert_error(RpcError(-32000, "insufficient funds for transfer"))
        InsufficientBalanceWithFeeError('insufficient funds for transfer')
    """
    if isinstance(error, ContractLogicError):
        return ExecutionRevertedError(str(error) or None)

    message = rpc_error_message(error)
    if message is None:
        return error

    lowered = message.lower()
    if "insufficient funds for transfer" in lowered or "insufficient funds for gas" in lowered \
            or "gas required exceeds allowance" in lowered:
        return InsufficientBalanceWithFeeError(message)
    if "execution reverted" in lowered:
        return ExecutionRevertedError(message)
    if "max fee per gas less than block base fee" in lowered:
        return LowerThanBaseGasLimitError(message)
    if "nonce too low" in lowered:
        return NonceAlreadyInBlockError(message)
    if "replacement transaction underpriced" in lowered:
        return ReplacementTransactionUnderpricedError(message)
    return error
