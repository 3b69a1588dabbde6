"""
Conversion between 4-word hash digests and 32-byte leaf keys.

A digest [d0, d1, d2, d3] stands for the 256-bit scalar
d0 + d1*2^64 + d2*2^128 + d3*2^192. The canonical key is that scalar as
32 big-endian bytes, so d3 comes first and d0 last.
"""

import string
from typing import List, Sequence

from .constants import DIGEST_SIZE, DIGEST_WORD_BYTES, KEY_SIZE
from .errors import FormatError

_WORD_MASK = (1 << 64) - 1
_HEX_DIGITS = 2 * KEY_SIZE


def digest_to_key(digest: Sequence[int]) -> bytes:
    """
    Serialize a digest into the canonical 32-byte key.

    Args:
        digest: 4 unsigned 64-bit words, least significant first

    Returns:
        32-byte big-endian key

    Raises:
        FormatError: If the digest is not 4 words in [0, 2^64)
    """
    if len(digest) != DIGEST_SIZE:
        raise FormatError(f"digest must have {DIGEST_SIZE} words, got {len(digest)}")

    out = bytearray()
    for word in reversed(digest):
        word = int(word)
        if word < 0 or word > _WORD_MASK:
            raise FormatError(f"digest word out of 64-bit range: {word}")
        out += word.to_bytes(DIGEST_WORD_BYTES, "big")
    return bytes(out)


def hex_to_digest(value: str) -> List[int]:
    """
    Parse a 64-digit hex constant into a digest.

    The first 16 hex digits become word 3, the last 16 become word 0, so
    digest_to_key(hex_to_digest(s)) == bytes.fromhex(s).

    Raises:
        FormatError: On a wrong length or non-hex characters
    """
    digits = value[2:] if value[:2].lower() == "0x" else value
    if len(digits) != _HEX_DIGITS:
        raise FormatError(f"expected {_HEX_DIGITS} hex digits, got {len(digits)}")
    if not all(c in string.hexdigits for c in digits):
        raise FormatError(f"not a hex string: {value!r}")

    words = [int(digits[i:i + 16], 16) for i in range(0, _HEX_DIGITS, 16)]
    return words[::-1]


def key_to_int(key: bytes) -> int:
    """Interpret a key as a big-endian integer."""
    if len(key) != KEY_SIZE:
        raise FormatError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    return int.from_bytes(key, "big")


def key_to_hex(key: bytes) -> str:
    """Render a key as 0x-prefixed lowercase hex."""
    if len(key) != KEY_SIZE:
        raise FormatError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    return "0x" + key.hex()
