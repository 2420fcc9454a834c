from .observables import Subscription, CompositeSubscription, Observable, LiveData
from .events import BaseEvent, SendingEvent, SendSuccessEvent, SendFailedEvent
from .exceptions import convert_error, rpc_error_message

__all__ = [
    "Subscription",
    "CompositeSubscription",
    "Observable",
    "LiveData",
    "BaseEvent",
    "SendingEvent",
    "SendSuccessEvent",
    "SendFailedEvent",
    "convert_error",
    "rpc_error_message",
]
