"""
Send EVM Transaction Confirmation View Model

Observes a transaction preparation service and turns its state into display
state for the confirmation screen:

    - send_enabled: whether the send button is enabled
    - error: localized readiness error, None when there is nothing to show
    - view_items: sections of rows describing the transaction
    - send_events: SendingEvent / SendSuccessEvent / SendFailedEvent

Rendering is a pure function of the latest snapshot of each channel, so the
three channels may fire in any order.
"""

import logging
from typing import List, Optional, Type

from ..adapters.address_mapper import TransactionInfoAddressMapper
from ..adapters.bases import CoinServiceBase, CoinServiceFactoryBase
from ..adapters.evm.decorations import (
    ApproveMethodDecoration,
    ContractMethodDecoration,
    Eip20CoinToken,
    EvmCoinToken,
    ExactInTrade,
    ExactOutTrade,
    RecognizedMethodDecoration,
    SwapMethodDecoration,
    TransferMethodDecoration,
    UnknownMethodDecoration,
)
from ..engine.events import BaseEvent, SendFailedEvent, SendingEvent, SendSuccessEvent
from ..engine.exceptions import (
    ExecutionRevertedError,
    InsufficientBalanceError,
    InsufficientBalanceWithFeeError,
    convert_error,
    rpc_error_message,
)
from ..engine.observables import CompositeSubscription, LiveData
from ..i18n.translator import Translator
from ..schemas.states import (
    DataState,
    Failed,
    Idle,
    NotReady,
    Ready,
    Sending,
    SendState,
    Sent,
    State,
)
from ..schemas.transactions import AdditionalInfo, SwapInfo, TransactionData
from ..schemas.view_items import (
    AddressViewItem,
    InputViewItem,
    SectionViewItem,
    SubheadViewItem,
    ValueType,
    ValueViewItem,
    ViewItem,
)
from ..services.bases import SendEvmTransactionServiceBase
from ..utils.logging import AppLogger

logger = logging.getLogger(__name__)


class SendEvmTransactionViewModel:
    """
    Confirmation screen state for one prepared EVM transaction.

    Subscribes to the service at construction and renders the current state
    right away. Call :meth:`close` (or use the instance as a context manager)
    when the screen goes away; all subscriptions are released together.

    Args:
        service: Transaction preparation service to observe.
        coin_service_factory: Resolves coins for amount formatting.
        translator: Localized strings, English by default.
        address_mapper: Known-contract labels for address rows.

    Example:
        with SendEvmTransactionViewModel(service, factory) as view_model:
            view_model.view_items.observe(render_sections)
            view_model.send_events.observe(on_send_event)
            view_model.send(AppLogger("send"))
    """

    def __init__(
        self,
        service: SendEvmTransactionServiceBase,
        coin_service_factory: CoinServiceFactoryBase,
        translator: Optional[Translator] = None,
        address_mapper: Type[TransactionInfoAddressMapper] = TransactionInfoAddressMapper,
    ):
        self.service = service
        self.coin_service_factory = coin_service_factory
        self.translator = translator or Translator()
        self.address_mapper = address_mapper

        self.send_enabled: LiveData[bool] = LiveData()
        self.error: LiveData[Optional[str]] = LiveData()
        self.view_items: LiveData[List[SectionViewItem]] = LiveData()
        self.send_events: LiveData[BaseEvent] = LiveData()

        self._subscriptions = CompositeSubscription()
        self._subscriptions.add(service.state_observable.subscribe(self._sync_state))
        self._subscriptions.add(service.tx_data_state_observable.subscribe(self._sync_tx_data_state))
        self._subscriptions.add(service.send_state_observable.subscribe(self._sync_send_state))

        self._sync_state(service.state)
        self._sync_tx_data_state(service.tx_data_state)
        self._sync_send_state(service.send_state)

    # =========================================================================
    # Commands and lifecycle
    # =========================================================================

    def send(self, logger: AppLogger) -> None:
        self.service.send(logger)

    def close(self) -> None:
        """Release every subscription to the service."""
        self._subscriptions.dispose()

    @property
    def closed(self) -> bool:
        return self._subscriptions.disposed

    def __enter__(self) -> "SendEvmTransactionViewModel":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # State synchronization
    # =========================================================================

    def _sync_state(self, state: State) -> None:
        if isinstance(state, Ready):
            self.send_enabled.post_value(True)
            self.error.post_value(None)
        elif isinstance(state, NotReady):
            self.send_enabled.post_value(False)
            self.error.post_value(self.format_error(state.errors[0]) if state.errors else None)

    def _sync_tx_data_state(self, tx_data_state: DataState) -> None:
        data = tx_data_state.data_or_none
        if data is None:
            return

        decoration = data.decoration
        transaction_data = data.transaction_data

        if decoration is not None and transaction_data is not None:
            sections = self.build_view_items(decoration, transaction_data, data.additional_info)
        elif transaction_data is not None:
            sections = self.build_fallback_view_items(transaction_data)
        else:
            return

        if sections is None:
            logger.debug("No confirmation layout for %s", type(decoration).__name__)
            return
        self.view_items.post_value(sections)

    def _sync_send_state(self, send_state: SendState) -> None:
        if isinstance(send_state, Idle):
            return
        if isinstance(send_state, Sending):
            self.send_enabled.post_value(False)
            self.send_events.post_value(SendingEvent())
        elif isinstance(send_state, Sent):
            self.send_events.post_value(SendSuccessEvent(transaction_hash=send_state.transaction_hash))
        elif isinstance(send_state, Failed):
            self.send_events.post_value(SendFailedEvent(error_message=self.format_error(send_state.error)))

    # =========================================================================
    # View item builders
    # =========================================================================

    def build_view_items(
        self,
        decoration: ContractMethodDecoration,
        transaction_data: TransactionData,
        additional_info: Optional[AdditionalInfo] = None,
    ) -> Optional[List[SectionViewItem]]:
        """
        Build the sections for a decoded transaction.

        Returns:
            Ordered sections, or None when the decoration kind has no layout or
            a coin it refers to cannot be resolved.
        """
        if isinstance(decoration, TransferMethodDecoration):
            return self._transfer_view_items(decoration.to, decoration.value, transaction_data.to, additional_info)
        if isinstance(decoration, ApproveMethodDecoration):
            return self._approve_view_items(decoration.spender, decoration.value, transaction_data.to)
        if isinstance(decoration, SwapMethodDecoration):
            return self._swap_view_items(decoration, additional_info)
        if isinstance(decoration, RecognizedMethodDecoration):
            return self._recognized_method_view_items(transaction_data, decoration.method)
        if isinstance(decoration, UnknownMethodDecoration):
            return self._unknown_method_view_items(transaction_data)
        return None

    def build_fallback_view_items(self, transaction_data: TransactionData) -> List[SectionViewItem]:
        """Amount, destination and calldata for a transaction without decoration."""
        return self._unknown_method_view_items(transaction_data)

    def _transfer_view_items(
        self,
        to: str,
        value: int,
        contract_address: str,
        additional_info: Optional[AdditionalInfo],
    ) -> Optional[List[SectionViewItem]]:
        coin_service = self.coin_service_factory.get_coin_service(contract_address)
        if coin_service is None:
            logger.warning("Transfer of unknown token %s, nothing to render", contract_address)
            return None

        send_info = additional_info.send_info if additional_info else None
        domain = send_info.domain if send_info else None

        view_items: List[ViewItem] = [
            SubheadViewItem(title=self._str("Send_Confirmation_YouSend"), value=coin_service.coin.title),
            ValueViewItem(
                title=self._str("Send_Confirmation_Amount"),
                value=coin_service.amount_data(value).get_formatted(),
                value_type=ValueType.OUTGOING,
            ),
            AddressViewItem(
                title=self._str("Send_Confirmation_To"),
                value_title=domain or self.address_mapper.map(to),
                value=to,
            ),
        ]
        return [SectionViewItem(view_items=view_items)]

    def _approve_view_items(self, spender: str, value: int, contract_address: str) -> Optional[List[SectionViewItem]]:
        coin_service = self.coin_service_factory.get_coin_service(contract_address)
        if coin_service is None:
            logger.warning("Approval of unknown token %s, nothing to render", contract_address)
            return None

        view_items: List[ViewItem] = [
            SubheadViewItem(title=self._str("Approve_YouApprove"), value=coin_service.coin.title),
            ValueViewItem(
                title=self._str("Send_Confirmation_Amount"),
                value=coin_service.amount_data(value).get_formatted(),
                value_type=ValueType.REGULAR,
            ),
            AddressViewItem(
                title=self._str("Approve_Spender"),
                value_title=self.address_mapper.map(spender),
                value=spender,
            ),
        ]
        return [SectionViewItem(view_items=view_items)]

    def _swap_view_items(
        self,
        decoration: SwapMethodDecoration,
        additional_info: Optional[AdditionalInfo],
    ) -> Optional[List[SectionViewItem]]:
        # Partial display would label amounts with the wrong coin
        coin_service_in = self._token_coin_service(decoration.token_in)
        if coin_service_in is None:
            return None
        coin_service_out = self._token_coin_service(decoration.token_out)
        if coin_service_out is None:
            return None

        info = additional_info.swap_info if additional_info else None
        trade = decoration.trade
        sections: List[SectionViewItem] = []

        if isinstance(trade, ExactInTrade):
            estimated_out = None
            if info is not None and info.estimated_out is not None:
                estimated_out = coin_service_out.amount_data_from_amount(info.estimated_out).get_formatted()

            sections.append(SectionViewItem(view_items=[
                SubheadViewItem(title=self._str("Swap_FromAmountTitle"), value=coin_service_in.coin.title),
                ValueViewItem(
                    title=self._str("Send_Confirmation_Amount"),
                    value=coin_service_in.amount_data(trade.amount_in).get_formatted(),
                    value_type=ValueType.OUTGOING,
                ),
            ]))
            sections.append(SectionViewItem(view_items=[
                SubheadViewItem(title=self._str("Swap_ToAmountTitle"), value=coin_service_out.coin.title),
                self._estimated_swap_amount(estimated_out, ValueType.INCOMING),
                ValueViewItem(
                    title=self._str("Swap_Confirmation_Guaranteed"),
                    value=coin_service_out.amount_data(trade.amount_out_min).get_formatted(),
                    value_type=ValueType.REGULAR,
                ),
            ]))
        elif isinstance(trade, ExactOutTrade):
            estimated_in = None
            if info is not None and info.estimated_in is not None:
                estimated_in = coin_service_in.amount_data_from_amount(info.estimated_in).get_formatted()

            sections.append(SectionViewItem(view_items=[
                SubheadViewItem(title=self._str("Swap_FromAmountTitle"), value=coin_service_in.coin.title),
                self._estimated_swap_amount(estimated_in, ValueType.OUTGOING),
                ValueViewItem(
                    title=self._str("Swap_Confirmation_Maximum"),
                    value=coin_service_in.amount_data(trade.amount_in_max).get_formatted(),
                    value_type=ValueType.REGULAR,
                ),
            ]))
            sections.append(SectionViewItem(view_items=[
                SubheadViewItem(title=self._str("Swap_ToAmountTitle"), value=coin_service_out.coin.title),
                ValueViewItem(
                    title=self._str("Swap_Confirmation_Guaranteed"),
                    value=coin_service_out.amount_data(trade.amount_out).get_formatted(),
                    value_type=ValueType.REGULAR,
                ),
            ]))
        else:
            return None

        other_view_items = self._swap_other_view_items(decoration.to, info)
        if other_view_items:
            sections.append(SectionViewItem(view_items=other_view_items))

        return sections

    def _swap_other_view_items(self, recipient: str, info: Optional[SwapInfo]) -> List[ViewItem]:
        view_items: List[ViewItem] = []

        if info is not None and info.slippage is not None:
            view_items.append(ValueViewItem(title=self._str("SwapSettings_SlippageTitle"), value=info.slippage))
        if info is not None and info.deadline is not None:
            view_items.append(ValueViewItem(title=self._str("SwapSettings_DeadlineTitle"), value=info.deadline))
        if recipient.lower() != self.service.own_address.lower():
            domain = info.recipient_domain if info is not None else None
            view_items.append(AddressViewItem(
                title=self._str("SwapSettings_RecipientAddressTitle"),
                value_title=domain or self.address_mapper.map(recipient),
                value=recipient,
            ))
        if info is not None and info.price is not None:
            view_items.append(ValueViewItem(title=self._str("Swap_Price"), value=info.price))
        if info is not None and info.price_impact is not None:
            view_items.append(ValueViewItem(title=self._str("Swap_PriceImpact"), value=info.price_impact))

        return view_items

    def _recognized_method_view_items(self, transaction_data: TransactionData, method: str) -> List[SectionViewItem]:
        address = transaction_data.to
        view_items: List[ViewItem] = [
            self._native_amount_view_item(transaction_data.value),
            AddressViewItem(title=self._str("Send_Confirmation_To"), value_title=address, value=address),
            SubheadViewItem(title=self._str("Send_Confirmation_Method"), value=method),
            InputViewItem(value=transaction_data.input_hex),
        ]
        return [SectionViewItem(view_items=view_items)]

    def _unknown_method_view_items(self, transaction_data: TransactionData) -> List[SectionViewItem]:
        address = transaction_data.to
        view_items: List[ViewItem] = [
            self._native_amount_view_item(transaction_data.value),
            AddressViewItem(title=self._str("Send_Confirmation_To"), value_title=address, value=address),
            InputViewItem(value=transaction_data.input_hex),
        ]
        return [SectionViewItem(view_items=view_items)]

    def _native_amount_view_item(self, value: int) -> ValueViewItem:
        return ValueViewItem(
            title=self._str("Send_Confirmation_Amount"),
            value=self.coin_service_factory.base_coin_service.amount_data(value).get_formatted(),
            value_type=ValueType.OUTGOING,
        )

    def _estimated_swap_amount(self, value: Optional[str], value_type: ValueType) -> ValueViewItem:
        title = self._str("Swap_Confirmation_Estimated")
        if value is None:
            return ValueViewItem(title=title, value=self._str("NotAvailable"), value_type=ValueType.DISABLED)
        return ValueViewItem(title=title, value=value, value_type=value_type)

    def _token_coin_service(self, token) -> Optional[CoinServiceBase]:
        if isinstance(token, EvmCoinToken):
            return self.coin_service_factory.base_coin_service
        if isinstance(token, Eip20CoinToken):
            coin_service = self.coin_service_factory.get_coin_service(token.address)
            if coin_service is None:
                logger.warning("Swap token %s is unknown, nothing to render", token.address)
            return coin_service
        return None

    # =========================================================================
    # Errors
    # =========================================================================

    def format_error(self, error: Exception) -> str:
        """
        Localized, non-empty message for any error.

        Raw RPC failures are converted to typed EVM errors first.
        """
        converted = convert_error(error)
        base_coin_service = self.coin_service_factory.base_coin_service

        if isinstance(converted, InsufficientBalanceError):
            required = base_coin_service.coin_value(converted.required_balance).get_formatted()
            return self._str("EthereumTransaction_Error_InsufficientBalance", required)
        if isinstance(converted, (InsufficientBalanceWithFeeError, ExecutionRevertedError)):
            return self._str("EthereumTransaction_Error_InsufficientBalanceForFee", base_coin_service.coin.code)
        message = (rpc_error_message(converted) or str(converted)).strip()
        return message or type(converted).__name__

    def _str(self, key: str, *args: object) -> str:
        return self.translator.get_string(key, *args)
