"""
Encode and decode identifiers in base-36, the custom base-64 alphabet and hex

All functions are pure and thread-safe. Explicit per-format decoders should be
preferred whenever the caller knows the format; parse_auto_detect() exists for
input of unknown origin and resolves ambiguity by a fixed priority order:

    1. starts with "0x" (any case)  -> hex
    2. only 0-9                     -> decimal
    3. only 0-9 a-z                 -> base-36
    4. only 0-9 a-z A-Z _ -         -> base-64, decoded after lowercasing

The first class that matches wins; a decode failure in that class is final.
Because of rule 4, a base-64 rendering containing uppercase letters does not
survive a round trip through auto-detection.

Example:
    >>> encode_base36(46)
    '1a'
    >>> parse_auto_detect("1a")
    46
    >>> parse_auto_detect("123")
    123
"""

import re

from idkit.codec.formats import BASE36_ALPHABET, BASE64_ALPHABET, HEX_PREFIX, IdFormat
from idkit.codec.models import IdView
from idkit.kernel.errors import IdentifierOutOfRange, InvalidFormat
from idkit.kernel.ids import MAX_ID, is_identifier

HEX_ALPHABET = "0123456789abcdef"

_BASE36_DIGITS = {ch: i for i, ch in enumerate(BASE36_ALPHABET)}
_BASE64_DIGITS = {ch: i for i, ch in enumerate(BASE64_ALPHABET)}
_HEX_DIGITS = {ch: i for i, ch in enumerate(HEX_ALPHABET)}

_DECIMAL_RE = re.compile(r"[0-9]+")
_BASE36_RE = re.compile(r"[0-9a-z]+")
_BASE64_RE = re.compile(r"[0-9a-zA-Z_-]+")

_MAX_DECIMAL_DIGITS = len(str(MAX_ID))


# =============================================================================
# Shared digit arithmetic
# =============================================================================


def _require_identifier(value: int) -> int:
    if not is_identifier(value):
        raise IdentifierOutOfRange(value)
    return value


def _require_text(text: object, format: str) -> str:
    if text is None:
        raise InvalidFormat(text, format, "value is missing")
    if not isinstance(text, str):
        raise InvalidFormat(text, format, "expected a string")
    if not text:
        raise InvalidFormat(text, format, "value is empty")
    return text


def _encode_digits(value: int, alphabet: str) -> str:
    _require_identifier(value)
    if value == 0:
        return alphabet[0]

    base = len(alphabet)
    chars: list[str] = []
    while value > 0:
        value, rem = divmod(value, base)
        chars.append(alphabet[rem])
    chars.reverse()
    return "".join(chars)


def _decode_digits(text: str, digits: dict[str, int], format: str) -> int:
    base = len(digits)
    result = 0
    for ch in text:
        digit = digits.get(ch)
        if digit is None:
            raise InvalidFormat(text, format, f"character {ch!r} is not in the alphabet")
        result = result * base + digit
        if result > MAX_ID:
            raise InvalidFormat(text, format, "value does not fit in 63 bits")
    return result


# =============================================================================
# Base-36
# =============================================================================


def encode_base36(value: int) -> str:
    """Render an identifier in lowercase base-36"""
    return _encode_digits(value, BASE36_ALPHABET)


def decode_base36(text: str) -> int:
    """
    Parse a base-36 string; case-insensitive

    Raises:
        InvalidFormat: If text is empty or has characters outside 0-9a-z
    """
    text = _require_text(text, IdFormat.BASE36.value)
    return _decode_digits(text.lower(), _BASE36_DIGITS, IdFormat.BASE36.value)


# =============================================================================
# Base-64 (custom alphabet)
# =============================================================================


def encode_base64(value: int) -> str:
    """Render an identifier over the 0-9a-zA-Z_- alphabet"""
    return _encode_digits(value, BASE64_ALPHABET)


def decode_base64(text: str) -> int:
    """
    Parse a string over the 0-9a-zA-Z_- alphabet; case-sensitive

    Raises:
        InvalidFormat: If text is empty or has characters outside the alphabet
    """
    text = _require_text(text, IdFormat.BASE64.value)
    return _decode_digits(text, _BASE64_DIGITS, IdFormat.BASE64.value)


# =============================================================================
# Hex
# =============================================================================


def encode_hex(value: int) -> str:
    """Render an identifier as '0x' followed by lowercase hex digits"""
    return HEX_PREFIX + _encode_digits(value, HEX_ALPHABET)


def decode_hex(text: str) -> int:
    """
    Parse a '0x'-prefixed hex string; digits are case-insensitive

    Raises:
        InvalidFormat: If the prefix is missing, no digits follow it, or a
            character is not a hex digit
    """
    text = _require_text(text, IdFormat.HEX.value)
    lowered = text.lower()
    if not lowered.startswith(HEX_PREFIX):
        raise InvalidFormat(text, IdFormat.HEX.value, "missing '0x' prefix")
    body = lowered[len(HEX_PREFIX):]
    if not body:
        raise InvalidFormat(text, IdFormat.HEX.value, "no digits after '0x'")
    return _decode_digits(body, _HEX_DIGITS, IdFormat.HEX.value)


# =============================================================================
# Dispatch
# =============================================================================

_ENCODERS = {
    IdFormat.BASE36: encode_base36,
    IdFormat.BASE64: encode_base64,
    IdFormat.HEX: encode_hex,
}

_DECODERS = {
    IdFormat.BASE36: decode_base36,
    IdFormat.BASE64: decode_base64,
    IdFormat.HEX: decode_hex,
}


def _resolve_format(format: IdFormat | str) -> IdFormat:
    try:
        return IdFormat(format)
    except ValueError:
        names = ", ".join(f.value for f in IdFormat)
        raise InvalidFormat(format, None, f"unknown format, expected one of {names}") from None


def encode(value: int, format: IdFormat | str) -> str:
    """Render an identifier in the requested format

    Raises:
        InvalidFormat: If format does not name a supported format
    """
    return _ENCODERS[_resolve_format(format)](value)


def decode(text: str, format: IdFormat | str) -> int:
    """
    Parse text in an explicitly named format

    Raises:
        InvalidFormat: If text is not valid for that format, or format does
            not name a supported format
    """
    return _DECODERS[_resolve_format(format)](text)


def decode_decimal(text: str) -> int:
    """
    Parse a plain unsigned decimal string

    Raises:
        InvalidFormat: If text has anything but ASCII digits or exceeds 63 bits
    """
    text = _require_text(text, "decimal")
    if not _DECIMAL_RE.fullmatch(text):
        raise InvalidFormat(text, "decimal", "only digits 0-9 are allowed")
    digits = text.lstrip("0") or "0"
    if len(digits) > _MAX_DECIMAL_DIGITS or int(digits) > MAX_ID:
        raise InvalidFormat(text, "decimal", "value does not fit in 63 bits")
    return int(digits)


def parse_auto_detect(text: str) -> int:
    """
    Parse text of unknown format using the fixed priority order

    Raises:
        InvalidFormat: If text matches no character class, or fails to decode
            in the class it matched
    """
    text = _require_text(text, "auto").strip()
    if not text:
        raise InvalidFormat(text, "auto", "value is blank")

    lowered = text.lower()
    if lowered.startswith(HEX_PREFIX):
        return decode_hex(lowered)
    if _DECIMAL_RE.fullmatch(text):
        return decode_decimal(text)
    if _BASE36_RE.fullmatch(text):
        return decode_base36(text)
    if _BASE64_RE.fullmatch(text):
        return decode_base64(lowered)

    raise InvalidFormat(text, "auto", "unknown identifier format")


def convert_all(value: int) -> IdView:
    """Bundle an identifier with its base-36, base-64 and hex renderings"""
    return IdView(
        value=_require_identifier(value),
        base36=encode_base36(value),
        base64=encode_base64(value),
        hex=encode_hex(value),
    )
