"""
Custom exceptions for idkit

Every failure the generators and codec can report is a subclass of IdKitError,
so callers can catch the whole family or single out one kind.

Fun fact: 2^63 milliseconds is roughly 292 million years - the 48-bit timestamp
field gives out much sooner, somewhere around the year 10889.
"""

from typing import Any


class IdKitError(Exception):
    """Base exception for all idkit errors"""

    pass


class InvalidFormat(IdKitError, ValueError):
    """
    Raised when a string cannot be decoded into an identifier

    Covers empty or missing input, characters outside the alphabet of the
    requested (or auto-detected) format, and values that decode to something
    outside the 63-bit identifier range. Parsing is deterministic, so this is
    never worth retrying.
    """

    def __init__(self, value: Any, format: str | None = None, reason: str = "") -> None:
        self.value = value
        self.format = format
        self.reason = reason
        label = f"{format} " if format else ""
        detail = f": {reason}" if reason else ""
        shown = repr(value)
        if len(shown) > 40:
            shown = f"{shown[:37]}..."
        super().__init__(f"Invalid {label}identifier {shown}{detail}")


class Overflow(IdKitError):
    """Raised when the clock reading does not fit in the 48-bit timestamp field"""

    def __init__(self, timestamp_ms: int) -> None:
        self.timestamp_ms = timestamp_ms
        super().__init__(
            f"Timestamp {timestamp_ms} ms exceeds the 48-bit limit - "
            "refusing to truncate it into a time-ordered id"
        )


class IdentifierOutOfRange(IdKitError, ValueError):
    """Raised when a value handed to an encoder is not a 63-bit non-negative int"""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"{value!r} is not an identifier - expected an int in [0, 2**63 - 1]"
        )
