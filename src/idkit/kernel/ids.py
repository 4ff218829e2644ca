"""
ID generation: time-ordered (ms_48) and random 63-bit identifiers

Every identifier is a non-negative int below 2^63, so it fits a signed 64-bit
column in any database without turning negative.

Time-ordered layout:

    high |-------48 bit-------|--16 bit--| low
         |  unix epoch millis  |  offset  |

Identifiers minted in strictly increasing milliseconds are strictly increasing.
Within one millisecond they increase until the 16-bit offset wraps; after
65536 ids in the same millisecond duplicates become possible. There is no node
segment, so uniqueness holds within one generator instance only.
"""

import secrets
import threading
from typing import Protocol

from idkit.kernel.errors import Overflow
from idkit.kernel.logging import get_logger
from idkit.kernel.metrics import ids_generated_total, offset_wraps_total, timestamp_overflow_total
from idkit.kernel.time import ClockProvider, RealClockProvider

logger = get_logger(__name__)

MAX_ID = 0x7FFFFFFFFFFFFFFF
SIGN_BIT = 1 << 63

TIMESTAMP_BITS = 48
OFFSET_BITS = 16
MAX_TIMESTAMP_MS = (1 << TIMESTAMP_BITS) - 1
OFFSET_MASK = (1 << OFFSET_BITS) - 1


class IdFactory(Protocol):
    """Protocol for ID generation strategies"""

    def generate(self) -> int:
        """Generate a new identifier"""
        ...


def is_identifier(value: object) -> bool:
    """True if value is an int inside the 63-bit identifier range"""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_ID


class AtomicCounter:
    """
    Fetch-and-increment counter wrapping at a power of two

    The read-modify-write runs under a private lock, so two threads never
    receive the same value within one wrap cycle.
    """

    def __init__(self, bits: int = OFFSET_BITS, start: int = 0) -> None:
        self._mask = (1 << bits) - 1
        self._value = start & self._mask
        self._lock = threading.Lock()

    def get_and_increment(self) -> int:
        """Return the current value and advance by one, wrapping to zero"""
        with self._lock:
            current = self._value
            self._value = (current + 1) & self._mask
        return current

    @property
    def value(self) -> int:
        """Next value that get_and_increment() will hand out"""
        return self._value


class TimeOrderedIdGenerator:
    """
    Generator for ms_48 identifiers

    Owns its offset counter; share one instance between threads that must not
    collide. The clock is injectable for tests.
    """

    def __init__(
        self,
        clock: ClockProvider | None = None,
        counter: AtomicCounter | None = None,
    ) -> None:
        self.clock = clock or RealClockProvider()
        self.counter = counter or AtomicCounter(OFFSET_BITS)

    def generate(self) -> int:
        """
        Mint a time-ordered identifier

        Raises:
            Overflow: If the clock reads more than 48 bits of milliseconds
        """
        timestamp_ms = self.clock.now_ms()
        if timestamp_ms < 0 or timestamp_ms > MAX_TIMESTAMP_MS:
            timestamp_overflow_total.inc()
            logger.error("Timestamp exceeds 48-bit limit", timestamp_ms=timestamp_ms)
            raise Overflow(timestamp_ms)

        offset = self.counter.get_and_increment()
        if offset == OFFSET_MASK:
            offset_wraps_total.inc()
            logger.debug("Offset counter wrapped", timestamp_ms=timestamp_ms)

        value = ((timestamp_ms << OFFSET_BITS) | offset) & MAX_ID
        assert value & SIGN_BIT == 0, "identifier sign bit must be clear"

        ids_generated_total.labels(kind="time_ordered").inc()
        return value


class RandomIdGenerator:
    """Generator for uniformly random 63-bit identifiers from the OS CSPRNG"""

    def generate(self) -> int:
        value = int.from_bytes(secrets.token_bytes(8), "big") & MAX_ID
        assert value & SIGN_BIT == 0, "identifier sign bit must be clear"

        ids_generated_total.labels(kind="random").inc()
        return value


def extract_timestamp(identifier: int) -> int:
    """Epoch milliseconds stored in the high 48 bits of a time-ordered id"""
    return identifier >> OFFSET_BITS


def extract_offset(identifier: int) -> int:
    """Sequence offset stored in the low 16 bits of a time-ordered id"""
    return identifier & OFFSET_MASK


# Global default generators
default_time_ordered_generator = TimeOrderedIdGenerator()
default_random_generator = RandomIdGenerator()


def generate_time_ordered_id() -> int:
    """Mint a time-ordered id from the process-wide default generator"""
    return default_time_ordered_generator.generate()


def generate_random_id() -> int:
    """Mint a random id"""
    return default_random_generator.generate()
