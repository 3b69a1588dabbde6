"""
Hash oracle contract.

Key derivation treats the Poseidon hash as an injectable capability: any
object with a hash(inputs, capacity) method returning four field elements
will do. GoldilocksPoseidon in poseidon.py is the real implementation;
tests inject deterministic stand-ins.
"""

import logging
import numbers
from abc import ABC, abstractmethod
from typing import List, Sequence

from .constants import CAPACITY_SIZE, HASH_INPUT_SIZE, HASH_POSEIDON_ALL_ZEROES
from .digest import hex_to_digest
from .errors import HashOracleError, ParameterError
from .field import GOLDILOCKS_PRIME

logger = logging.getLogger(__name__)


class HashOracle(ABC):
    """Fixed-arity hash: 8 rate words plus 4 capacity words in, 4 words out."""

    @abstractmethod
    def hash(self, inputs: Sequence[int], capacity: Sequence[int]) -> List[int]:
        """
        Hash one 8-word message under a 4-word capacity.

        Raises:
            HashOracleError: If any word is not a field element or the
                computation fails
        """
        raise NotImplementedError("Subclass must implement hash")


def check_hash_inputs(inputs: Sequence[int], capacity: Sequence[int]) -> None:
    """
    Validate the shape and range of a hash call.

    Raises:
        HashOracleError: On wrong lengths, a non-integer word or a word
            >= GOLDILOCKS_PRIME
    """
    if len(inputs) != HASH_INPUT_SIZE:
        raise HashOracleError(f"inputs must have {HASH_INPUT_SIZE} elements, got {len(inputs)}")
    if len(capacity) != CAPACITY_SIZE:
        raise HashOracleError(f"capacity must have {CAPACITY_SIZE} elements, got {len(capacity)}")
    for word in list(inputs) + list(capacity):
        if isinstance(word, bool) or not isinstance(word, numbers.Integral):
            raise HashOracleError(f"{word!r} is not an integer field element")
        if not 0 <= word < GOLDILOCKS_PRIME:
            raise HashOracleError(f"{word} is not a Goldilocks field element")


def verify_default_capacity(oracle: HashOracle) -> None:
    """
    Check an oracle against the published all-zeroes digest.

    The default capacity is H([0]*8, [0]*4). An oracle built from the
    wrong round constants would silently re-derive every key, so this is
    checked once after loading parameters.

    Raises:
        ParameterError: If the oracle disagrees with the seed constant
    """
    expected = hex_to_digest(HASH_POSEIDON_ALL_ZEROES)
    actual = [int(w) for w in oracle.hash([0] * HASH_INPUT_SIZE, [0] * CAPACITY_SIZE)]
    if actual != expected:
        raise ParameterError(
            f"oracle hash of zeroes {actual} does not match capacity seed {expected}"
        )
    logger.debug("Oracle %s reproduces the default capacity", type(oracle).__name__)
