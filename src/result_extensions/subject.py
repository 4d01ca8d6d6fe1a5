"""Publish/subscribe subject for forwarding Results to many subscribers.

PassthroughSubject keeps no history: subscribers only see values published
after they subscribed. Callback subscribers are called synchronously, in
subscription order; stream subscribers receive values through an anyio
memory object stream and can consume them with `async for`.

Example:
    ```python
    subject = PassthroughSubject[Result[int, str]]()
    subject.subscribe(print)

    Ok(1).publish(subject)  # prints Ok(1)
    Err('x').publish(subject)  # prints Err('x')

    async with subject.stream() as values:
        async for value in values:
            ...
    ```
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any, Protocol, Self, runtime_checkable

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from result_extensions._logging import get_logger

__all__ = ['PassthroughSubject', 'Publisher', 'Subscription']

logger = get_logger(__name__)


@runtime_checkable
class Publisher[T](Protocol):
    """Anything values can be published to. publish() must not raise."""

    def publish(self, value: T) -> None: ...


class Subscription:
    """Handle returned by PassthroughSubject.subscribe().

    Cancelling is idempotent. Can be used as a context manager that
    cancels on exit.
    """

    __slots__ = ('_cancel', '_cancelled')

    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel = cancel
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Stop delivering values to this subscriber."""
        if not self._cancelled:
            self._cancelled = True
            self._cancel()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()


class PassthroughSubject[T]:
    """Subject that broadcasts each published value to current subscribers.

    publish() never raises: a failing callback is logged and the remaining
    subscribers still receive the value. Once complete() is called the
    subject drops further values and ends every stream.

    Not thread-safe; publish from a single thread or event loop.
    """

    __slots__ = ('_callbacks', '_completed', '_next_id', '_streams')

    def __init__(self) -> None:
        self._callbacks: dict[int, Callable[[T], Any]] = {}
        self._streams: list[MemoryObjectSendStream[T]] = []
        self._completed = False
        self._next_id = 0

    @property
    def completed(self) -> bool:
        """Whether complete() has been called."""
        return self._completed

    @property
    def subscriber_count(self) -> int:
        """Number of live callback and stream subscribers.

        Streams whose receiving end was closed are dropped first.
        """
        self._drop_closed_streams()
        return len(self._callbacks) + len(self._streams)

    def _drop_closed_streams(self) -> None:
        live = []
        for send in self._streams:
            if send.statistics().open_receive_streams:
                live.append(send)
            else:
                send.close()
        self._streams = live

    def subscribe(self, callback: Callable[[T], Any]) -> Subscription:
        """Register a callback for every value published from now on.

        Args:
            callback: Called synchronously with each published value.

        Returns:
            A Subscription that removes the callback when cancelled.
        """
        key = self._next_id
        self._next_id += 1
        if not self._completed:
            self._callbacks[key] = callback
        return Subscription(lambda: self._callbacks.pop(key, None))

    def stream(self, max_buffer_size: float = math.inf) -> MemoryObjectReceiveStream[T]:
        """Open an async subscription.

        The returned stream yields every value published from now on and
        ends when the subject completes. Closing the stream unsubscribes
        immediately.

        Args:
            max_buffer_size: Values buffered for this subscriber. When a
                bounded buffer is full, new values are dropped for it.

        Returns:
            An anyio receive stream.
        """
        send: MemoryObjectSendStream[T]
        receive: MemoryObjectReceiveStream[T]
        send, receive = anyio.create_memory_object_stream(max_buffer_size)
        if self._completed:
            send.close()
        else:
            self._streams.append(send)
        return receive

    def publish(self, value: T) -> None:
        """Deliver value to every current subscriber.

        Args:
            value: The value to broadcast.
        """
        if self._completed:
            logger.debug('publish_after_complete', value=repr(value))
            return

        for callback in list(self._callbacks.values()):
            try:
                callback(value)
            except Exception:
                logger.exception('subscriber_failed', callback=repr(callback))

        for send in list(self._streams):
            try:
                send.send_nowait(value)
            except (anyio.BrokenResourceError, anyio.ClosedResourceError):
                self._streams.remove(send)
                send.close()
            except anyio.WouldBlock:
                logger.warning('subscriber_lagging', value=repr(value))

    def complete(self) -> None:
        """Finish the subject: drop callbacks and end all streams."""
        if self._completed:
            return
        self._completed = True
        self._callbacks.clear()
        streams, self._streams = self._streams, []
        for send in streams:
            send.close()
        logger.debug('subject_completed', streams=len(streams))
