"""
Textual formats an identifier can be rendered in

The 64-symbol alphabet is digits, then lowercase, then uppercase, then '_'
and '-'. It is not RFC 4648 base64 and the two must not be mixed.
"""

from enum import Enum

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE64_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"
HEX_PREFIX = "0x"


class IdFormat(str, Enum):
    """Rendering formats supported by the codec"""

    BASE36 = "base36"
    BASE64 = "base64"
    HEX = "hex"
