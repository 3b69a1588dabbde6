"""
Integer to field-element encoding.

Addresses and storage positions are arbitrary-precision integers, but the
hash only accepts Goldilocks elements. Each integer is split into eight
32-bit chunks, which are always below the field modulus.

Slot i holds bits [32*i, 32*i + 32) of the value, so slot 0 is the least
significant chunk. Reading the big-endian byte string of the value in
4-byte groups from the right gives the same layout.
"""

import string
from typing import List, Union

from .constants import (
    ADDRESS_BITS,
    ADDRESS_BYTES,
    FE_BITS,
    FE_MASK,
    HASH_INPUT_SIZE,
    STORAGE_POSITION_BITS,
    STORAGE_POSITION_BYTES,
)
from .errors import EncodingError, FormatError

SUPPORTED_WIDTHS = (ADDRESS_BITS, STORAGE_POSITION_BITS)

IntLike = Union[int, bytes, bytearray, str]


def scalar_to_fea(value: int, width_bits: int) -> List[int]:
    """
    Split a non-negative integer into 8 field-safe 32-bit words.

    Args:
        value: Integer to encode
        width_bits: Declared width of the value (160 or 256)

    Returns:
        List of 8 ints, least significant chunk first. Slots beyond
        width_bits / 32 are zero.

    Raises:
        EncodingError: If value is negative, not an int, or wider than
            width_bits, or if width_bits is unsupported
    """
    if width_bits not in SUPPORTED_WIDTHS:
        raise EncodingError(f"width_bits must be one of {SUPPORTED_WIDTHS}, got {width_bits}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"value must be an int, got {type(value).__name__}")
    if value < 0:
        raise EncodingError(f"value must be non-negative, got {value}")
    if value.bit_length() > width_bits:
        raise EncodingError(
            f"value needs {value.bit_length()} bits, exceeds declared width of {width_bits}"
        )

    return [(value >> (FE_BITS * i)) & FE_MASK for i in range(HASH_INPUT_SIZE)]


def _int_from(value: IntLike, max_bytes: int, what: str) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) > max_bytes:
            raise EncodingError(f"{what} must be at most {max_bytes} bytes, got {len(value)}")
        return int.from_bytes(value, "big")

    if isinstance(value, str):
        digits = value[2:] if value[:2].lower() == "0x" else value
        if len(digits) > 2 * max_bytes:
            raise EncodingError(
                f"{what} must be at most {2 * max_bytes} hex digits, got {len(digits)}"
            )
        if not all(c in string.hexdigits for c in digits):
            raise FormatError(f"{what} is not valid hex: {value!r}")
        return int(digits, 16) if digits else 0

    # Width is checked by scalar_to_fea
    return value


def address_to_int(address: IntLike) -> int:
    """
    Normalize an account address to an int.

    Accepts an int, up to 20 big-endian bytes, or a hex string with an
    optional 0x prefix.
    """
    return _int_from(address, ADDRESS_BYTES, "address")


def storage_position_to_int(position: IntLike) -> int:
    """Normalize a storage slot (int, up to 32 bytes, or hex) to an int."""
    return _int_from(position, STORAGE_POSITION_BYTES, "storage position")


def encode_address(address: IntLike) -> List[int]:
    """Encode an address into its 8-word hash input (slots 5-7 zero)."""
    return scalar_to_fea(address_to_int(address), ADDRESS_BITS)


def encode_storage_position(position: IntLike) -> List[int]:
    """Encode a storage position into all 8 words of a hash input."""
    return scalar_to_fea(storage_position_to_int(position), STORAGE_POSITION_BITS)
