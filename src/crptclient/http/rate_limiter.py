"""Rate gate for controlling request frequency.

Provides a fixed-window gate that admits at most ``limit`` requests per
``window`` seconds. Callers over the limit are delayed until the window
ends, never rejected.

Example:
    >>> from crptclient.http import RateGate
    >>>
    >>> gate = RateGate(limit=10, window=1.0)  # 10 requests per second
    >>> gate.admit()  # Waits if needed
    0.0
    >>> # ... make request ...
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from typing import Callable

from crptclient.core.exceptions import AdmissionCancelledError, InvalidConfigurationError
from crptclient.models.base import TimeUnit

logger = logging.getLogger("crptclient.gate")


def _validate(limit: int, window: float) -> None:
    if limit <= 0:
        raise InvalidConfigurationError("Request limit must be greater than zero")
    if window <= 0:
        raise InvalidConfigurationError("Window duration must be greater than zero")


def _unit_seconds(time_unit: TimeUnit | str) -> float:
    try:
        return TimeUnit(time_unit).seconds
    except ValueError:
        raise InvalidConfigurationError(f"Unsupported time unit: {time_unit}") from None


class _WindowState:
    """Counter and start time of the current fixed window.

    Not synchronized; the owning gate holds its lock around every mutation.
    """

    def __init__(self, limit: int, window: float, clock: Callable[[], float]):
        self.limit = limit
        self.window = window
        self.clock = clock
        self.count = 0
        self.window_start = clock()

    def try_admit(self) -> float:
        """Admit if the window has room.

        Returns:
            0.0 if admitted, otherwise the seconds left in the full window
        """
        now = self.clock()
        elapsed = now - self.window_start
        if elapsed >= self.window:
            self.count = 0
            self.window_start = now
            elapsed = 0.0

        if self.count < self.limit:
            self.count += 1
            return 0.0
        return self.window - elapsed

    def start_new_window(self) -> None:
        """Open a window at the current time holding one admission."""
        self.window_start = self.clock()
        self.count = 1

    def remaining(self) -> float:
        return max(0.0, self.window - (self.clock() - self.window_start))

    def reset(self) -> None:
        self.count = 0
        self.window_start = self.clock()


class RateGate:
    """Thread-safe fixed-window rate gate.

    The whole admission decision, including any sleep, runs under one lock,
    so callers are admitted in lock acquisition order and only one caller
    at a time waits out a full window. Callers queued behind a sleeper
    re-check the window once they get the lock.

    Example:
        >>> gate = RateGate(limit=3, window=1.0)
        >>> [gate.admit() for _ in range(3)]  # Immediate
        [0.0, 0.0, 0.0]
        >>> gate.count
        3

    Attributes:
        limit: Maximum admissions per window
        window: Window length in seconds
    """

    def __init__(
        self,
        limit: int,
        window: float = 1.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the gate.

        Args:
            limit: Maximum admissions per window (must be positive)
            window: Window length in seconds (must be positive)
            clock: Monotonic time source in seconds

        Raises:
            InvalidConfigurationError: If limit or window is not positive
        """
        _validate(limit, window)
        self._state = _WindowState(limit, window, clock)
        self._lock = threading.Lock()

    @classmethod
    def per(cls, time_unit: TimeUnit | str, limit: int) -> RateGate:
        """Create a gate allowing ``limit`` requests per one ``time_unit``.

        Example:
            >>> RateGate.per(TimeUnit.MINUTES, 100).window
            60.0
        """
        return cls(limit, _unit_seconds(time_unit))

    @property
    def limit(self) -> int:
        return self._state.limit

    @property
    def window(self) -> float:
        return self._state.window

    # Accessors read without the lock; admit() holds it through its sleep
    @property
    def count(self) -> int:
        """Admissions granted in the current window."""
        return self._state.count

    @property
    def window_start(self) -> float:
        return self._state.window_start

    def remaining(self) -> float:
        """Seconds left in the current window."""
        return self._state.remaining()

    def admit(self, cancel_event: threading.Event | None = None) -> float:
        """Block until one more request may be sent, then record it.

        Args:
            cancel_event: Optional event; setting it while the caller waits
                aborts the wait without granting admission

        Returns:
            Time waited in seconds (excluding time spent queued on the lock)

        Raises:
            AdmissionCancelledError: If ``cancel_event`` was set while waiting
        """
        with self._lock:
            wait_time = self._state.try_admit()
            if wait_time == 0.0:
                return 0.0

            logger.debug(
                f"Limit of {self._state.limit} reached, waiting {wait_time:.3f}s for next window"
            )
            if cancel_event is None:
                time.sleep(wait_time)
            elif cancel_event.wait(wait_time):
                raise AdmissionCancelledError("Cancelled while waiting for rate gate")

            self._state.start_new_window()
            return wait_time

    def reset(self) -> None:
        """Reset the gate to an empty window starting now.

        Useful for testing or after long pauses.
        """
        with self._lock:
            self._state.reset()


class AsyncRateGate:
    """Fixed-window rate gate for asyncio tasks.

    Same semantics as :class:`RateGate`, with an ``asyncio.Lock`` and
    ``asyncio.sleep``. Cancelling a waiting task raises
    ``asyncio.CancelledError`` in it and leaves the window untouched.

    Example:
        >>> import asyncio
        >>> gate = AsyncRateGate(limit=10, window=1.0)
        >>>
        >>> async def make_requests():
        ...     for i in range(20):
        ...         await gate.admit()
        ...         # ... make request ...
        >>>
        >>> asyncio.run(make_requests())
    """

    def __init__(
        self,
        limit: int,
        window: float = 1.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the gate.

        Raises:
            InvalidConfigurationError: If limit or window is not positive
        """
        _validate(limit, window)
        self._state = _WindowState(limit, window, clock)
        self._lock = asyncio.Lock()

    @classmethod
    def per(cls, time_unit: TimeUnit | str, limit: int) -> AsyncRateGate:
        """Create a gate allowing ``limit`` requests per one ``time_unit``."""
        return cls(limit, _unit_seconds(time_unit))

    @property
    def limit(self) -> int:
        return self._state.limit

    @property
    def window(self) -> float:
        return self._state.window

    @property
    def count(self) -> int:
        """Admissions granted in the current window."""
        return self._state.count

    @property
    def window_start(self) -> float:
        return self._state.window_start

    def remaining(self) -> float:
        """Seconds left in the current window."""
        return self._state.remaining()

    async def admit(self) -> float:
        """Wait until one more request may be sent, then record it.

        Returns:
            Time waited in seconds (excluding time spent queued on the lock)
        """
        async with self._lock:
            wait_time = self._state.try_admit()
            if wait_time == 0.0:
                return 0.0

            logger.debug(
                f"Limit of {self._state.limit} reached, waiting {wait_time:.3f}s for next window"
            )
            await asyncio.sleep(wait_time)
            self._state.start_new_window()
            return wait_time

    def reset(self) -> None:
        """Reset the gate to an empty window starting now."""
        self._state.reset()


__all__ = [
    "AsyncRateGate",
    "RateGate",
]
