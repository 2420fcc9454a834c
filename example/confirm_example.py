from decimal import Decimal

from evm_send_confirm import (
    EvmCoinServiceFactory,
    SendEvmTransactionServiceBase,
    SendEvmTransactionViewModel,
    Translator,
    load_settings,
    parse_decoration,
)
from evm_send_confirm.schemas.states import Ready, Sending, Sent, Success, TxDataState
from evm_send_confirm.schemas.transactions import AdditionalInfo, SwapInfo, TransactionData
from evm_send_confirm.utils.logging import AppLogger, configure_root

own_address = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"  # Replace with the wallet address
router = "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D"


class DemoSendService(SendEvmTransactionServiceBase):
    """Publishes a fixed swap instead of estimating gas against a node."""

    @property
    def own_address(self):
        return own_address

    def prepare(self):
        decoration = parse_decoration({
            "decoration_type": "swap",
            "trade": {"trade_type": "exact_in", "amount_in": 10**18, "amount_out_min": 1_990_000_000},
            "token_in": {"token_type": "evm_coin"},
            "token_out": {"token_type": "eip20", "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"},
            "to": own_address,
            "deadline": 1_900_000_000,
        })
        info = AdditionalInfo(swap_info=SwapInfo(
            estimated_out=Decimal("2000.5"),
            slippage="0.5%",
            deadline="20 min",
            price="1 ETH = 2,000.5 USDC",
        ))
        tx = TransactionData(to=router, value=10**18, input="0x7ff36ab5")
        self._set_tx_data_state(Success(TxDataState(transaction_data=tx, additional_info=info, decoration=decoration)))
        self._set_state(Ready())

    def send(self, logger):
        logger.info("broadcasting swap")
        self._set_send_state(Sending())
        self._set_send_state(Sent(bytes.fromhex("ab" * 32)))


if __name__ == "__main__":
    settings = load_settings()
    configure_root(settings.log_level)

    service = DemoSendService()
    factory = EvmCoinServiceFactory.from_caip2(settings.chain_id, rates={"ETH": Decimal("2000")})

    with SendEvmTransactionViewModel(service, factory, translator=Translator(settings.locale)) as view_model:
        view_model.view_items.observe(
            lambda sections: [print(item) for section in sections for item in section.view_items]
        )
        view_model.send_enabled.observe(lambda enabled: print("Send enabled:", enabled))
        view_model.send_events.observe(lambda event: print("Event:", event))

        service.prepare()
        view_model.send(AppLogger("send").get_scoped("swap"))
