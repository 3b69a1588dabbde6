"""
Goldilocks prime field using galois library.

Thin wrapper exposing the base field the Poseidon hash works over. Leaf-key
derivation itself only needs the modulus (to range-check words); the
permutation in poseidon.py does its arithmetic on GF arrays.
"""

import galois
import numpy as np
from typing import Sequence

# Goldilocks prime: p = 2^64 - 2^32 + 1
GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

# Base field GF(p)
GF = galois.GF(GOLDILOCKS_PRIME)


def is_field_element(value: int) -> bool:
    """Return True if value is a canonical Goldilocks element."""
    return 0 <= value < GOLDILOCKS_PRIME


def to_field_array(values: Sequence[int]) -> np.ndarray:
    """
    Lift a sequence of canonical integers into a GF array.

    Args:
        values: Integers in [0, p)

    Returns:
        GF array with the same length and order
    """
    return GF([int(v) for v in values])


def from_field_array(values: np.ndarray) -> list:
    """Convert a GF array back to a list of Python ints."""
    return [int(v) for v in values]
