"""Shared bookkeeping of peripherals and events for adapter implementations."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import AsyncIterator, Callable, Hashable
from typing import Generic, TypeVar

from .api import CentralEvent, DeviceDisconnected
from .broadcast import Broadcast, NoReceiversError, stream_from_receiver

logger = logging.getLogger(__name__)

P = TypeVar("P")


class AdapterManager(Generic[P]):
    """Holds the known peripherals of an adapter and broadcasts its events.

    Peripherals must provide an ``id()`` method. By default a peripheral is
    forgotten when it disconnects, except on macOS.
    """

    def __init__(
        self, *, remove_on_disconnect: bool | None = None, capacity: int = 16
    ) -> None:
        if remove_on_disconnect is None:
            remove_on_disconnect = sys.platform != "darwin"
        self._remove_on_disconnect = remove_on_disconnect
        self._peripherals: dict[Hashable, P] = {}
        self._lock = threading.RLock()
        self._events: Broadcast[CentralEvent] = Broadcast(capacity)

    def emit(self, event: CentralEvent) -> None:
        """Broadcast ``event`` to all event streams."""
        if self._remove_on_disconnect and isinstance(event, DeviceDisconnected):
            with self._lock:
                self._peripherals.pop(event.id, None)
        try:
            self._events.send(event)
        except NoReceiversError:
            logger.debug("Lost central event, while nothing subscribed: %r", event)

    def event_stream(self) -> AsyncIterator[CentralEvent]:
        """A stream of the events emitted from now on."""
        return stream_from_receiver(self._events.subscribe())

    def add_peripheral(self, peripheral: P) -> None:
        """Register a new peripheral; its id must not be known yet."""
        peripheral_id = peripheral.id()  # type: ignore[attr-defined]
        with self._lock:
            if peripheral_id in self._peripherals:
                raise ValueError("Adding a peripheral that's already in the map.")
            self._peripherals[peripheral_id] = peripheral

    def peripherals(self) -> list[P]:
        """All known peripherals."""
        with self._lock:
            return list(self._peripherals.values())

    def peripheral(self, peripheral_id: Hashable) -> P | None:
        """The peripheral with ``peripheral_id``, or None."""
        with self._lock:
            return self._peripherals.get(peripheral_id)

    def update_peripheral(
        self, peripheral_id: Hashable, func: Callable[[P], P | None]
    ) -> bool:
        """Apply ``func`` to the peripheral under the lock.

        A non-None result replaces the stored peripheral. Returns False when
        no peripheral has that id.
        """
        with self._lock:
            current = self._peripherals.get(peripheral_id)
            if current is None:
                return False
            result = func(current)
            if result is not None:
                self._peripherals[peripheral_id] = result
            return True