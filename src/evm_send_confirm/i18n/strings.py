"""String catalogs. Placeholders use ``str.format`` positional fields."""

from typing import Dict

STRINGS_EN: Dict[str, str] = {
    "Send_Confirmation_YouSend": "You Send",
    "Send_Confirmation_Amount": "Amount",
    "Send_Confirmation_To": "To",
    "Send_Confirmation_Method": "Method",
    "Approve_YouApprove": "You Approve",
    "Approve_Spender": "Spender",
    "Swap_FromAmountTitle": "You Pay",
    "Swap_ToAmountTitle": "You Get",
    "Swap_Confirmation_Estimated": "Estimated",
    "Swap_Confirmation_Guaranteed": "Guaranteed",
    "Swap_Confirmation_Maximum": "Maximum",
    "Swap_Price": "Price",
    "Swap_PriceImpact": "Price Impact",
    "SwapSettings_SlippageTitle": "Slippage Tolerance",
    "SwapSettings_DeadlineTitle": "Transaction Deadline",
    "SwapSettings_RecipientAddressTitle": "Recipient",
    "NotAvailable": "n/a",
    "EthereumTransaction_Error_InsufficientBalance": "Insufficient balance. Required: {0}",
    "EthereumTransaction_Error_InsufficientBalanceForFee": "Insufficient {0} balance to cover the fee",
}

STRINGS_DE: Dict[str, str] = {
    "Send_Confirmation_YouSend": "Sie senden",
    "Send_Confirmation_Amount": "Betrag",
    "Send_Confirmation_To": "An",
    "Send_Confirmation_Method": "Methode",
    "Approve_YouApprove": "Sie genehmigen",
    "Approve_Spender": "Berechtigter",
    "Swap_FromAmountTitle": "Sie zahlen",
    "Swap_ToAmountTitle": "Sie erhalten",
    "Swap_Confirmation_Estimated": "Geschätzt",
    "Swap_Confirmation_Guaranteed": "Garantiert",
    "Swap_Confirmation_Maximum": "Maximal",
    "Swap_Price": "Preis",
    "Swap_PriceImpact": "Preiseinfluss",
    "SwapSettings_SlippageTitle": "Slippage-Toleranz",
    "SwapSettings_DeadlineTitle": "Transaktionsfrist",
    "SwapSettings_RecipientAddressTitle": "Empfänger",
    "NotAvailable": "k. A.",
    "EthereumTransaction_Error_InsufficientBalance": "Unzureichendes Guthaben. Benötigt: {0}",
    "EthereumTransaction_Error_InsufficientBalanceForFee": "Unzureichendes {0}-Guthaben für die Gebühr",
}

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": STRINGS_EN,
    "de": STRINGS_DE,
}

DEFAULT_LOCALE = "en"
