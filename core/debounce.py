from __future__ import annotations
from typing import Any, Callable, Optional, Protocol


class Cancellable(Protocol):
    def cancel(self) -> Any: ...


class Scheduler(Protocol):
    """Anything with asyncio's `call_later` shape, e.g. an event loop."""
    def call_later(self, delay: float, callback: Callable[[], Any]) -> Cancellable: ...


class Debouncer:
    """
    Trailing-edge debounce with a single owned timer handle.

    Each `schedule` call cancels the pending task and starts the delay over, so a
    burst of calls runs only the last callback, `delay` seconds after the burst ends.
    """

    def __init__(self, delay: float, scheduler: Scheduler):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.delay = delay
        self._scheduler = scheduler
        self._handle: Optional[Cancellable] = None
        self._fn: Optional[Callable[[], Any]] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, fn: Callable[[], Any]) -> None:
        self.cancel()
        self._fn = fn
        self._handle = self._scheduler.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._fn = None

    def _fire(self) -> None:
        fn = self._fn
        self._handle = None
        self._fn = None
        if fn is not None:
            fn()
