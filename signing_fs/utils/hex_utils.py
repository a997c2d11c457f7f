"""Hexadecimal decoding helpers."""
import string
from typing import Optional

from signing_fs.config import settings
from signing_fs.utils.errors import InvalidInputError

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bytes(hex_string: str, strict: Optional[bool] = None) -> bytes:
    """Decode a string of hex digit pairs into raw bytes.

    In lenient mode a pair that is not two hex digits is dropped and an
    unpaired trailing character is ignored. In strict mode both raise
    InvalidInputError. ``strict=None`` falls back to ``settings.HEX_STRICT``.
    """
    if strict is None:
        strict = settings.HEX_STRICT

    if strict and len(hex_string) % 2:
        raise InvalidInputError(f"Odd-length hex string: {len(hex_string)} characters")

    decoded = bytearray()
    for i in range(0, len(hex_string) - 1, 2):
        pair = hex_string[i:i + 2]
        if pair[0] in _HEX_DIGITS and pair[1] in _HEX_DIGITS:
            decoded.append(int(pair, 16))
        elif strict:
            raise InvalidInputError(f"Invalid hex pair {pair!r} at offset {i}")
    return bytes(decoded)
