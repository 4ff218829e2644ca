"""
IdService - main façade for issuing, converting and inspecting identifiers

This is what the HTTP layer talks to. It wires the generators to the codec,
accepts identifiers either as ints or as strings of unknown format, and adds
logging and metrics around the pure core.

Example:
    >>> from idkit import IdService
    >>> service = IdService()
    >>> issued = service.issue_time_ordered()
    >>> service.inspect(issued.value).offset
    0
    >>> service.convert("0x2e").base36
    '1a'
"""

from collections.abc import Iterable

from idkit.codec.converter import convert_all, parse_auto_detect
from idkit.codec.models import IdInspection, IdView, IssuedId
from idkit.kernel.errors import IdentifierOutOfRange, InvalidFormat
from idkit.kernel.ids import (
    IdFactory,
    RandomIdGenerator,
    TimeOrderedIdGenerator,
    extract_offset,
    extract_timestamp,
    is_identifier,
)
from idkit.kernel.logging import get_logger
from idkit.kernel.metrics import record_decode, track_duration
from idkit.kernel.time import ClockProvider, RealClockProvider, ms_to_datetime

logger = get_logger(__name__)


class IdService:
    """
    Identifier service façade

    Provides:
    - Issuing random and time-ordered ids
    - Parsing ids given as int or string
    - Converting to every rendering
    - Decomposing time-ordered ids
    - Base-36 substring matching over a set of ids
    """

    def __init__(
        self,
        clock: ClockProvider | None = None,
        time_ordered_generator: IdFactory | None = None,
        random_generator: IdFactory | None = None,
    ) -> None:
        """
        Initialize the service

        Args:
            clock: Clock for issue timestamps (real clock if None)
            time_ordered_generator: Generator for ms_48 ids (built on clock if None)
            random_generator: Generator for random ids
        """
        self.clock = clock or RealClockProvider()
        self.time_ordered_generator = time_ordered_generator or TimeOrderedIdGenerator(
            clock=self.clock
        )
        self.random_generator = random_generator or RandomIdGenerator()

    # =========================================================================
    # Issuing
    # =========================================================================

    @track_duration("issue_random")
    def issue_random(self) -> IssuedId:
        """Mint a random id"""
        return self._issue("random", self.random_generator)

    @track_duration("issue_time_ordered")
    def issue_time_ordered(self) -> IssuedId:
        """
        Mint a time-ordered id

        Raises:
            Overflow: If the clock no longer fits in 48 bits
        """
        return self._issue("time_ordered", self.time_ordered_generator)

    def _issue(self, kind: str, generator: IdFactory) -> IssuedId:
        value = generator.generate()
        issued = IssuedId(kind=kind, view=convert_all(value), issued_at=self.clock.now())
        logger.info("Issued id", kind=kind, value=value, base36=issued.view.base36)
        return issued

    # =========================================================================
    # Parsing and conversion
    # =========================================================================

    def parse(self, value: str | int) -> int:
        """
        Accept an id as an int or as a string in any supported format

        Raises:
            InvalidFormat: If a string cannot be decoded
            IdentifierOutOfRange: If an int is outside the 63-bit range
        """
        if isinstance(value, int) and not isinstance(value, bool):
            if not is_identifier(value):
                raise IdentifierOutOfRange(value)
            return value

        try:
            result = parse_auto_detect(value)  # type: ignore[arg-type]
        except InvalidFormat as e:
            record_decode("auto", success=False)
            logger.warning("Rejected identifier", value=repr(value), reason=e.reason)
            raise
        record_decode("auto", success=True)
        return result

    @track_duration("convert")
    def convert(self, value: str | int) -> IdView:
        """Parse value and return all of its renderings"""
        return convert_all(self.parse(value))

    @track_duration("inspect")
    def inspect(self, value: str | int) -> IdInspection:
        """Parse value and split it into timestamp and offset"""
        identifier = self.parse(value)
        timestamp_ms = extract_timestamp(identifier)
        return IdInspection(
            view=convert_all(identifier),
            timestamp_ms=timestamp_ms,
            timestamp=ms_to_datetime(timestamp_ms),
            offset=extract_offset(identifier),
        )

    # =========================================================================
    # Search helpers
    # =========================================================================

    def matches_base36_substring(self, value: str | int, substring: str) -> bool:
        """True if the base-36 rendering of value contains substring"""
        needle = _normalize_substring(substring)
        return needle in convert_all(self.parse(value)).base36

    def filter_by_base36_substring(
        self, values: Iterable[str | int], substring: str
    ) -> list[int]:
        """
        Keep the ids whose base-36 rendering contains substring

        Order is preserved. Every value must parse; a bad one raises.
        """
        needle = _normalize_substring(substring)
        matches = []
        for value in values:
            identifier = self.parse(value)
            if needle in convert_all(identifier).base36:
                matches.append(identifier)
        return matches


def _normalize_substring(substring: str) -> str:
    if substring is None:
        raise InvalidFormat(substring, "base36", "substring is missing")
    if not isinstance(substring, str):
        raise InvalidFormat(substring, "base36", "substring must be a string")
    needle = substring.strip().lower()
    if not needle:
        raise InvalidFormat(substring, "base36", "substring cannot be empty")
    return needle
