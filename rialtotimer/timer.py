"""One-shot and periodic timers that run a callback on a background thread."""

from __future__ import annotations

import enum
import threading
import weakref
from datetime import timedelta
from typing import Callable, Optional, Union

Timeout = Union[float, int, timedelta]
Callback = Optional[Callable[[], object]]

__all__ = ["TimerType", "Timer", "TimerFactory", "get_factory"]


class TimerType(enum.Enum):
    """Whether a timer fires once or repeatedly."""

    ONE_SHOT = enum.auto()
    PERIODIC = enum.auto()


def _to_seconds(timeout: Timeout) -> float:
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


class Timer:
    """Runs ``callback`` after ``timeout`` on its own thread.

    ``timeout`` is a number of seconds or a :class:`datetime.timedelta`.
    A periodic timer keeps firing every ``timeout`` until cancelled.
    The timer starts as soon as it is created.
    """

    def __init__(
        self,
        timeout: Timeout,
        callback: Callback,
        timer_type: TimerType = TimerType.ONE_SHOT,
    ) -> None:
        self._timeout = _to_seconds(timeout)
        self._callback = callback
        self._timer_type = timer_type
        self._active = True
        self._condition = threading.Condition()
        self._thread = threading.Thread(target=self._run, name="timer", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while True:
            with self._condition:
                cancelled = self._condition.wait_for(
                    lambda: not self._active, timeout=max(self._timeout, 0.0)
                )
                fire = not cancelled and self._active and self._callback is not None
            if fire:
                self._callback()
            if not (self._timer_type is TimerType.PERIODIC and self._active):
                break
        self._active = False

    def cancel(self) -> None:
        """Stop the timer and wait for its thread, unless called from that thread."""
        with self._condition:
            self._active = False
            self._condition.notify_all()
        if threading.current_thread() is not self._thread and self._thread.is_alive():
            self._thread.join()

    def is_active(self) -> bool:
        """True while the timer may still fire."""
        return self._active

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


class TimerFactory:
    """Creates :class:`Timer` objects."""

    def create_timer(
        self,
        timeout: Timeout,
        callback: Callback,
        timer_type: TimerType = TimerType.ONE_SHOT,
    ) -> Timer:
        return Timer(timeout, callback, timer_type)


_factory_ref: Optional["weakref.ReferenceType[TimerFactory]"] = None
_factory_lock = threading.Lock()


def get_factory() -> TimerFactory:
    """Return the shared factory, creating a new one if none is alive."""
    global _factory_ref
    with _factory_lock:
        factory = _factory_ref() if _factory_ref is not None else None
        if factory is None:
            factory = TimerFactory()
            _factory_ref = weakref.ref(factory)
        return factory