"""In-memory pub/sub bus for controller events, delivered once per tick."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

# Subscribing to this name receives every signal.
ANY = "*"

_Handler = Callable[[str, dict[str, Any]], None]


@dataclass(frozen=True)
class Signal:
    name: str
    data: dict[str, Any] = field(default_factory=dict)


class SignalBus:
    """Signals queue on ``publish`` and reach handlers on ``flush``.

    Handlers for a specific name run before ``ANY`` handlers, each group in
    subscription order.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[Signal] = []

    @property
    def pending(self) -> int:
        return len(self._queue)

    def subscribe(self, signal_name: str, handler: _Handler) -> Callable[[], None]:
        """Register ``handler``; returns a callable that unsubscribes it."""
        self._subscribers.setdefault(signal_name, []).append(handler)
        return lambda: self.unsubscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append(Signal(signal_name, data))

    def flush(self) -> list[Signal]:
        """Deliver queued signals in order and return them.

        Signals published by handlers wait for the next flush.
        """
        delivered, self._queue = self._queue, []
        for signal in delivered:
            handlers = self._subscribers.get(signal.name, []) + self._subscribers.get(ANY, [])
            for handler in handlers:
                handler(signal.name, signal.data)
        return delivered

    def clear(self) -> None:
        self._queue.clear()
