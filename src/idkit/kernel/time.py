"""
Clock provider abstraction for deterministic testing

Time-ordered ids are only as good as the clock they read. Making the clock
injectable lets tests pin the millisecond, walk it forward, or push it past
the 48-bit limit to exercise the overflow path.
"""

import time
from datetime import datetime, timedelta, timezone
from typing import Protocol


class ClockProvider(Protocol):
    """Protocol for clocks - allows deterministic testing"""

    def now_ms(self) -> int:
        """Return milliseconds since the Unix epoch"""
        ...

    def now(self) -> datetime:
        """Return current UTC datetime"""
        ...


class RealClockProvider:
    """Production clock backed by the system wall clock"""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class TestClockProvider:
    """
    Controllable clock for deterministic tests

    Holds a fixed millisecond value that only moves when the test says so.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, initial_ms: int = 0) -> None:
        """
        Initialize with optional fixed time

        Args:
            initial_ms: Starting epoch milliseconds (defaults to the Unix epoch)
        """
        self._current_ms = initial_ms

    def now_ms(self) -> int:
        return self._current_ms

    def now(self) -> datetime:
        return ms_to_datetime(self._current_ms)

    def set_ms(self, ms: int) -> None:
        """Set current time to a specific epoch millisecond"""
        self._current_ms = ms

    def set_time(self, dt: datetime) -> None:
        """Set current time from an aware datetime"""
        self._current_ms = datetime_to_ms(dt)

    def advance_ms(self, ms: int) -> None:
        """Advance time by the given number of milliseconds"""
        self._current_ms += ms

    def advance_seconds(self, seconds: int) -> None:
        self._current_ms += seconds * 1000


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ms_to_datetime(ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime"""
    return _EPOCH + timedelta(milliseconds=ms)


def datetime_to_ms(dt: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds"""
    return (dt - _EPOCH) // timedelta(milliseconds=1)


# Global default clock
default_clock: ClockProvider = RealClockProvider()
