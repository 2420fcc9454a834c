"""
Observable channels with explicit subscriptions.

Services publish state through ``Observable`` channels, view models publish
display state through ``LiveData`` holders, and every subscription can be
released on its own or together with others through a
``CompositeSubscription``.

Callbacks run synchronously on the emitting thread, in subscription order.
Exceptions raised by a callback propagate to the emitter.
"""

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

Callback = Callable[[T], None]


class Subscription:
    """Handle returned by ``subscribe``. Disposing it detaches the callback."""

    def __init__(self, on_dispose: Optional[Callable[[], None]] = None) -> None:
        self._on_dispose = on_dispose
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Detach the callback. Calling it more than once is a no-op."""
        if self._disposed:
            return
        self._disposed = True
        if self._on_dispose is not None:
            on_dispose, self._on_dispose = self._on_dispose, None
            on_dispose()


class CompositeSubscription:
    """
    Group of subscriptions released together.

    Subscriptions added after :meth:`dispose` are disposed immediately so a
    late subscription can never outlive its owner.

    Example:
        subscriptions = CompositeSubscription()
        subscriptions.add(service.state_observable.subscribe(on_state))
        subscriptions.add(service.send_state_observable.subscribe(on_send_state))
        ...
        subscriptions.dispose()  # both callbacks detached
    """

    def __init__(self) -> None:
        self._subscriptions: List[Subscription] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __len__(self) -> int:
        return len(self._subscriptions)

    def add(self, subscription: Subscription) -> Subscription:
        if self._disposed:
            subscription.dispose()
            return subscription
        self._subscriptions.append(subscription)
        return subscription

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.dispose()


class Observable(Generic[T]):
    """Push channel without memory: subscribers only see values emitted after they subscribed."""

    def __init__(self) -> None:
        self._callbacks: List[Callback] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: Callback) -> Subscription:
        """
        Register a callback for future values.

        Args:
            callback: Called with each emitted value.

        Returns:
            Subscription detaching the callback when disposed.

        Raises:
            TypeError: If callback is not callable.
        """
        if not callable(callback):
            raise TypeError(f"Callback must be callable, got {type(callback).__name__}")

        self._callbacks.append(callback)

        def detach() -> None:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

        return Subscription(detach)

    def emit(self, value: T) -> None:
        # Snapshot so callbacks may unsubscribe while being notified
        for callback in list(self._callbacks):
            callback(value)


class LiveData(Observable[T]):
    """
    Observable holding its latest value.

    ``observe`` replays the current value to new observers by default, the
    way a view binding expects to render immediately.
    """

    def __init__(self, value: Optional[T] = None) -> None:
        super().__init__()
        self._value = value
        self._version = 0

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def version(self) -> int:
        """Number of values posted so far."""
        return self._version

    def post_value(self, value: T) -> None:
        self._value = value
        self._version += 1
        self.emit(value)

    def observe(self, callback: Callback, replay: bool = True) -> Subscription:
        subscription = self.subscribe(callback)
        if replay and self._version > 0:
            callback(self._value)
        return subscription
