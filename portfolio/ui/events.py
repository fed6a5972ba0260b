"""Event objects and the page's virtual clock.

Everything in the page model runs on one thread. Time only moves when
``Scheduler.advance`` is called, which runs due timers and animation frames
in order.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

FRAME_MS = 16


@dataclass
class Event:
    type: str
    target: Any = None
    key: Optional[str] = None
    client_x: float = 0
    client_y: float = 0
    default_prevented: bool = False
    propagation_stopped: bool = False
    detail: Dict[str, Any] = field(default_factory=dict)

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class EventTarget:
    """Minimal listener registry shared by elements, the document and window."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Callable[[Event], Any]]] = {}

    def add_event_listener(self, event_type: str, callback: Callable[[Event], Any]) -> None:
        self._listeners.setdefault(event_type, []).append(callback)

    def remove_event_listener(self, event_type: str, callback: Callable[[Event], Any]) -> None:
        listeners = self._listeners.get(event_type, [])
        if callback in listeners:
            listeners.remove(callback)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def _fire(self, event: Event) -> None:
        for callback in list(self._listeners.get(event.type, [])):
            callback(event)


class Scheduler:
    def __init__(self) -> None:
        self.now = 0
        self._queue: List[Tuple[int, int, int]] = []
        self._callbacks: Dict[int, Callable[[], Any]] = {}
        self._ids = itertools.count(1)
        self._order = itertools.count()

    def set_timeout(self, callback: Callable[[], Any], delay_ms: int = 0) -> int:
        handle = next(self._ids)
        self._callbacks[handle] = callback
        heapq.heappush(self._queue, (self.now + max(0, delay_ms), next(self._order), handle))
        return handle

    def clear_timeout(self, handle: Optional[int]) -> None:
        if handle is not None:
            self._callbacks.pop(handle, None)

    def request_animation_frame(self, callback: Callable[[], Any]) -> int:
        return self.set_timeout(callback, FRAME_MS)

    def pending(self) -> int:
        return len(self._callbacks)

    def advance(self, ms: int) -> None:
        """Move the clock forward, running every callback that falls due."""
        deadline = self.now + ms
        while self._queue and self._queue[0][0] <= deadline:
            due, _, handle = heapq.heappop(self._queue)
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue
            self.now = due
            callback()
        self.now = deadline

    def run_all(self) -> None:
        while self._callbacks:
            self.advance(max(0, self._queue[0][0] - self.now))


def debounce(scheduler: Scheduler, func: Callable[..., Any], wait_ms: int) -> Callable[..., None]:
    """Delay func until wait_ms passes without another call."""
    handle = None

    def debounced(*args, **kwargs):
        nonlocal handle
        scheduler.clear_timeout(handle)
        handle = scheduler.set_timeout(lambda: func(*args, **kwargs), wait_ms)

    return debounced
