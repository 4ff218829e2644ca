"""
Kernel - identifier generation and the infrastructure around it

Errors, clocks, logging and metrics live here alongside the two generators.
"""

from idkit.kernel.errors import IdentifierOutOfRange, IdKitError, InvalidFormat, Overflow
from idkit.kernel.ids import (
    MAX_ID,
    AtomicCounter,
    IdFactory,
    RandomIdGenerator,
    TimeOrderedIdGenerator,
    extract_offset,
    extract_timestamp,
    generate_random_id,
    generate_time_ordered_id,
)
from idkit.kernel.time import ClockProvider, RealClockProvider, TestClockProvider

__all__ = [
    # IDs
    "MAX_ID",
    "AtomicCounter",
    "IdFactory",
    "RandomIdGenerator",
    "TimeOrderedIdGenerator",
    "extract_offset",
    "extract_timestamp",
    "generate_random_id",
    "generate_time_ordered_id",
    # Time
    "ClockProvider",
    "RealClockProvider",
    "TestClockProvider",
    # Errors
    "IdKitError",
    "InvalidFormat",
    "Overflow",
    "IdentifierOutOfRange",
]
