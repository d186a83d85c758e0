"""A bounded multi-consumer broadcast channel for asyncio."""

from __future__ import annotations

import asyncio
import weakref
from collections import deque
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

from .api import ValueNotification

T = TypeVar("T")


class LaggedError(Exception):
    """The receiver fell behind and ``skipped`` messages were lost to it."""

    def __init__(self, skipped: int) -> None:
        super().__init__(f"receiver lagged behind by {skipped} messages")
        self.skipped = skipped


class NoReceiversError(Exception):
    """A message was sent while no receiver was subscribed."""

    def __init__(self, item: object) -> None:
        super().__init__("no receivers subscribed")
        self.item = item


class Broadcast(Generic[T]):
    """Sends each message to every subscribed receiver, keeping at most ``capacity``."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("broadcast capacity must be at least 1")
        self.capacity = capacity
        self._buffer: deque[T] = deque(maxlen=capacity)
        self._next_seq = 0
        self._receivers: weakref.WeakSet[Receiver[T]] = weakref.WeakSet()
        self._waiters: list[asyncio.Future[None]] = []

    @property
    def _oldest_seq(self) -> int:
        return self._next_seq - len(self._buffer)

    def send(self, item: T) -> int:
        """Send ``item`` to all receivers and return how many there are."""
        count = len(self._receivers)
        if count == 0:
            raise NoReceiversError(item)
        self._buffer.append(item)
        self._next_seq += 1
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            if not waiter.done():
                waiter.set_result(None)
        return count

    def subscribe(self) -> Receiver[T]:
        """Create a receiver that sees messages sent from now on."""
        receiver = Receiver(self, self._next_seq)
        self._receivers.add(receiver)
        return receiver

    def receiver_count(self) -> int:
        """Number of live receivers."""
        return len(self._receivers)


class Receiver(Generic[T]):
    """One subscriber of a :class:`Broadcast`."""

    def __init__(self, channel: Broadcast[T], start: int) -> None:
        self._channel = channel
        self._next = start

    async def recv(self) -> T:
        """Wait for the next message; raise LaggedError if messages were missed."""
        channel = self._channel
        while True:
            oldest = channel._oldest_seq
            if self._next < oldest:
                skipped = oldest - self._next
                self._next = oldest
                raise LaggedError(skipped)
            if self._next < channel._next_seq:
                item = channel._buffer[self._next - oldest]
                self._next += 1
                return item
            waiter = asyncio.get_running_loop().create_future()
            channel._waiters.append(waiter)
            await waiter


async def stream_from_receiver(receiver: Receiver[T]) -> AsyncIterator[T]:
    """Yield every message the receiver gets, passing over lag errors."""
    while True:
        try:
            item = await receiver.recv()
        except LaggedError:
            continue
        yield item


def notifications_stream_from_receiver(
    receiver: Receiver[ValueNotification],
) -> AsyncIterator[ValueNotification]:
    """Stream of value notifications from a broadcast receiver."""
    return stream_from_receiver(receiver)