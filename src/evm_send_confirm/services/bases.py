"""
Abstract base class for transaction preparation services.

A preparation service estimates gas, validates balances, decodes calldata and
finally sends the transaction. The confirmation view model only observes its
three state channels and forwards the user's send action; everything else is
up to the concrete implementation.
"""

import logging
from abc import ABC, abstractmethod

from ..engine.observables import Observable
from ..schemas.states import DataState, Idle, Loading, NotReady, SendState, State
from ..utils.logging import AppLogger

logger = logging.getLogger(__name__)


class SendEvmTransactionServiceBase(ABC):
    """
    State holder and publisher for one transaction being prepared.

    Subclasses update state through the protected ``_set_*`` methods, which
    store the latest value and emit it on the matching channel. Each channel
    has a single writer and last value wins.

    Key Responsibilities:
    1. state / state_observable: readiness to send
    2. tx_data_state / tx_data_state_observable: decoded transaction snapshot
    3. send_state / send_state_observable: lifecycle of the send attempt
    4. own_address: the wallet's address
    5. send: start sending; progress is reported through send_state only

    Example Implementation:
        class Web3SendEvmTransactionService(SendEvmTransactionServiceBase):
            # Estimates gas with web3, signs and broadcasts in send()
            pass
    """

    def __init__(self) -> None:
        self._state: State = NotReady()
        self._tx_data_state: DataState = Loading()
        self._send_state: SendState = Idle()

        self.state_observable: Observable[State] = Observable()
        self.tx_data_state_observable: Observable[DataState] = Observable()
        self.send_state_observable: Observable[SendState] = Observable()

    @property
    def state(self) -> State:
        return self._state

    @property
    def tx_data_state(self) -> DataState:
        return self._tx_data_state

    @property
    def send_state(self) -> SendState:
        return self._send_state

    def _set_state(self, state: State) -> None:
        self._state = state
        self.state_observable.emit(state)

    def _set_tx_data_state(self, tx_data_state: DataState) -> None:
        self._tx_data_state = tx_data_state
        self.tx_data_state_observable.emit(tx_data_state)

    def _set_send_state(self, send_state: SendState) -> None:
        logger.debug("Send state -> %s", type(send_state).__name__)
        self._send_state = send_state
        self.send_state_observable.emit(send_state)

    @property
    @abstractmethod
    def own_address(self) -> str:
        """The wallet's EIP-55 address."""
        pass

    @abstractmethod
    def send(self, logger: AppLogger) -> None:
        """
        Start sending the prepared transaction.

        Must not block on network I/O and must not raise for send failures;
        failures are reported as ``Failed`` on the send state channel.

        Args:
            logger: Scoped logger of the user action that triggered the send.
        """
        pass
