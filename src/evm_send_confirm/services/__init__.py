from .bases import SendEvmTransactionServiceBase

__all__ = [
    "SendEvmTransactionServiceBase",
]
