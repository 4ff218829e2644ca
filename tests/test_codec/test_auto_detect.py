"""
Tests for format auto-detection

The priority order (hex, decimal, base-36, base-64) is a contract, including
its known ambiguities.
"""

import pytest

from idkit.codec.converter import decode_base36, encode_base64, encode_hex, parse_auto_detect
from idkit.kernel.errors import InvalidFormat
from idkit.kernel.ids import MAX_ID


def test_hex_prefix_wins():
    assert parse_auto_detect("0x1a") == 26
    assert parse_auto_detect("0X1A") == 26


def test_all_digits_is_decimal_not_base36():
    assert parse_auto_detect("123") == 123
    assert parse_auto_detect("0") == 0


def test_lowercase_alphanumeric_is_base36():
    assert parse_auto_detect("1a") == 46
    assert parse_auto_detect("z") == 35


def test_uppercase_goes_to_base64_branch():
    """'Az' is not base-36 by character class; base-64 decodes its lowercased form"""
    assert parse_auto_detect("Az") == 10 * 64 + 35
    assert parse_auto_detect("1A") == 64 + 10


def test_underscore_and_dash_go_to_base64_branch():
    assert parse_auto_detect("a_b") == 10 * 4096 + 62 * 64 + 11
    assert parse_auto_detect("1-") == 64 + 63


def test_uppercase_base64_does_not_round_trip():
    """Documented asymmetry: auto-detect lowercases before the base-64 branch"""
    rendering = encode_base64(46)  # "K"
    assert parse_auto_detect(rendering) != 46
    assert parse_auto_detect(rendering) == 20


def test_whitespace_is_trimmed():
    assert parse_auto_detect("  1a\n") == 46
    assert parse_auto_detect("\t0x2e ") == 46


def test_hex_and_base36_renderings_round_trip():
    value = 1_700_000_000_000 << 16 | 7
    assert parse_auto_detect(encode_hex(value)) == value
    assert parse_auto_detect(str(value)) == value
    assert parse_auto_detect("idkit0abc") == decode_base36("idkit0abc")


def test_no_fallback_after_class_selected():
    """A hex-prefixed string with bad digits fails instead of trying base-36"""
    with pytest.raises(InvalidFormat) as exc_info:
        parse_auto_detect("0xzz")

    assert exc_info.value.format == "hex"


def test_decimal_beyond_63_bits_is_rejected():
    assert parse_auto_detect(str(MAX_ID)) == MAX_ID

    with pytest.raises(InvalidFormat):
        parse_auto_detect(str(MAX_ID + 1))


def test_very_long_decimal_is_rejected_as_invalid_format():
    """Thousands of digits fail as a range error, not as int() digit-limit error"""
    with pytest.raises(InvalidFormat, match="63 bits") as exc_info:
        parse_auto_detect("1" * 5000)

    assert exc_info.value.format == "decimal"


def test_leading_zeros_do_not_count_against_decimal_range():
    assert parse_auto_detect("0" * 5000 + "46") == 46
    assert parse_auto_detect("0" * 40 + str(MAX_ID)) == MAX_ID


@pytest.mark.parametrize("bad", ["", None, "a b@c", "   ", "1.5", "+1", "é"])
def test_unparseable_input(bad):
    with pytest.raises(InvalidFormat):
        parse_auto_detect(bad)


def test_non_string_input():
    with pytest.raises(InvalidFormat):
        parse_auto_detect(46)
