from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

Listener = Callable[[Any], None]

EVENTS: Tuple[str, ...] = ("viewChange", "select", "rangeStart", "rangeSelect", "clear")


class EventEmitter:
    """
    Synchronous publish/subscribe. Listeners run in registration order before
    emit() returns; exceptions raised by a listener propagate to the caller.
    """
    def __init__(self, events: Tuple[str, ...] = EVENTS):
        self._listeners: Dict[str, List[Listener]] = {name: [] for name in events}

    def _check(self, event: str) -> None:
        if event not in self._listeners:
            raise ValueError(f"Unknown event '{event}'. Available: {sorted(self._listeners)}")

    def on(self, event: str, fn: Listener) -> Callable[[], None]:
        """Subscribe; returns a callable that unsubscribes."""
        self._check(event)
        self._listeners[event].append(fn)
        return lambda: self.off(event, fn)

    def off(self, event: str, fn: Listener) -> None:
        self._check(event)
        self._listeners[event] = [f for f in self._listeners[event] if f != fn]

    def emit(self, event: str, data: Any = None) -> None:
        self._check(event)
        # snapshot so listeners may unsubscribe while being called
        for fn in list(self._listeners[event]):
            fn(data)

    def listener_count(self, event: str) -> int:
        self._check(event)
        return len(self._listeners[event])
