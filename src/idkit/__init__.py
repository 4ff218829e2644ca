"""
idkit - time-ordered 63-bit identifiers and their textual renderings

Mints process-unique ids (random or millisecond-ordered) and converts them
losslessly between integers, base-36, a URL-safe 64-symbol alphabet and hex.
"""

from idkit.codec import IdFormat, IdView, convert_all, decode, encode, parse_auto_detect
from idkit.kernel import (
    IdKitError,
    InvalidFormat,
    Overflow,
    extract_offset,
    extract_timestamp,
    generate_random_id,
    generate_time_ordered_id,
)
from idkit.service import IdService

__version__ = "0.1.0"
__all__ = [
    "IdService",
    "IdFormat",
    "IdView",
    "generate_random_id",
    "generate_time_ordered_id",
    "extract_timestamp",
    "extract_offset",
    "encode",
    "decode",
    "parse_auto_detect",
    "convert_all",
    "IdKitError",
    "InvalidFormat",
    "Overflow",
    "__version__",
]
