from .send_evm_transaction import SendEvmTransactionViewModel

__all__ = [
    "SendEvmTransactionViewModel",
]
