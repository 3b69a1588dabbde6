"""
Constants shared by the key-derivation modules.

The capacity seed below is a cross-implementation compatibility value: it
must match every other implementation computing the same state tree.
DO NOT MODIFY.
"""

from enum import IntEnum


class LeafType(IntEnum):
    """Integer tag placed in slot 6 of the address hash input."""

    BALANCE = 0
    NONCE = 1
    CODE = 2
    STORAGE = 3
    SC_LENGTH = 4


# Poseidon digest of eight zero inputs with a zero capacity. Used as the
# capacity of every single-stage (balance, nonce, code, code length) key.
HASH_POSEIDON_ALL_ZEROES = "0xc71603f33a1144ca7953db0ab48808f4c4055e3364a246c33c18a9786cb0b359"

# Hash shape: 8 rate words in, 4 capacity words in, 4 digest words out
HASH_INPUT_SIZE = 8
CAPACITY_SIZE = 4
DIGEST_SIZE = 4

# Field-element chunking
FE_BITS = 32
FE_MASK = (1 << FE_BITS) - 1

# Declared widths of the two encoded quantities
ADDRESS_BITS = 160
STORAGE_POSITION_BITS = 256
ADDRESS_BYTES = ADDRESS_BITS // 8
STORAGE_POSITION_BYTES = STORAGE_POSITION_BITS // 8

# Serialized key size
KEY_SIZE = 32
DIGEST_WORD_BYTES = 8
