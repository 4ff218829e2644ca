"""
Codec - textual renderings of identifiers

Base-36, a custom 64-symbol alphabet and '0x' hex, plus auto-detection for
strings whose format is not known up front.
"""

from idkit.codec.converter import (
    convert_all,
    decode,
    decode_base36,
    decode_base64,
    decode_decimal,
    decode_hex,
    encode,
    encode_base36,
    encode_base64,
    encode_hex,
    parse_auto_detect,
)
from idkit.codec.formats import BASE36_ALPHABET, BASE64_ALPHABET, IdFormat
from idkit.codec.models import IdInspection, IdView, IssuedId

__all__ = [
    "IdFormat",
    "BASE36_ALPHABET",
    "BASE64_ALPHABET",
    "encode",
    "decode",
    "encode_base36",
    "decode_base36",
    "encode_base64",
    "decode_base64",
    "encode_hex",
    "decode_hex",
    "decode_decimal",
    "parse_auto_detect",
    "convert_all",
    "IdView",
    "IssuedId",
    "IdInspection",
]
