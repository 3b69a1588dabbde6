"""
Leaf-key derivation for the account state tree.

Balance, nonce, code and code-length keys hash the encoded address under a
shared default capacity, with the leaf type in slot 6:

    key = H([a0, a1, a2, a3, a4, 0, leaf_type, 0], default_capacity)

Storage keys first fold the 256-bit slot position into a capacity and hash
the address under it:

    hk0 = H([p0, p1, p2, p3, p4, p5, p6, p7], [0, 0, 0, 0])
    key = H([a0, a1, a2, a3, a4, 0, 3, 0], hk0)

Every input is encoded before the first hash call, so an over-width
address or position never reaches the oracle. Oracle errors propagate
unchanged.
"""

import functools
import logging
from typing import List, Optional, Sequence, Tuple

from .constants import CAPACITY_SIZE, HASH_POSEIDON_ALL_ZEROES, LeafType
from .digest import digest_to_key, hex_to_digest
from .encoding import IntLike, encode_address, encode_storage_position
from .oracle import HashOracle

logger = logging.getLogger(__name__)

ZERO_CAPACITY: Tuple[int, ...] = (0,) * CAPACITY_SIZE


@functools.lru_cache(maxsize=None)
def default_capacity() -> Tuple[int, ...]:
    """Capacity shared by all single-stage keys (parsed once, read-only)."""
    return tuple(hex_to_digest(HASH_POSEIDON_ALL_ZEROES))


def _address_input(address_fea: Sequence[int], leaf_type: LeafType) -> List[int]:
    # Slots 0-4 address, 5 reserved, 6 leaf type, 7 reserved
    return list(address_fea[:5]) + [0, int(leaf_type), 0]


class KeyDeriver:
    """
    Derives 32-byte tree keys with an injected hash oracle.

    Stateless apart from the oracle reference; one instance can be shared
    across threads.
    """

    def __init__(self, oracle: HashOracle):
        self.oracle = oracle

    def _single_stage_key(self, address: IntLike, leaf_type: LeafType) -> bytes:
        capacity = default_capacity()
        key1 = _address_input(encode_address(address), leaf_type)
        digest = self.oracle.hash(key1, list(capacity))
        logger.debug("Derived %s key", leaf_type.name)
        return digest_to_key(digest)

    def balance_key(self, address: IntLike) -> bytes:
        """Key of the account balance leaf."""
        return self._single_stage_key(address, LeafType.BALANCE)

    def nonce_key(self, address: IntLike) -> bytes:
        """Key of the account nonce leaf."""
        return self._single_stage_key(address, LeafType.NONCE)

    def code_key(self, address: IntLike) -> bytes:
        """Key of the contract bytecode-hash leaf."""
        return self._single_stage_key(address, LeafType.CODE)

    def code_length_key(self, address: IntLike) -> bytes:
        """Key of the contract bytecode-length leaf."""
        return self._single_stage_key(address, LeafType.SC_LENGTH)

    def storage_key(self, address: IntLike, position: IntLike) -> bytes:
        """
        Key of one contract storage slot.

        Args:
            address: Contract address (up to 160 bits)
            position: Storage slot (up to 256 bits)

        Returns:
            32-byte key

        Raises:
            EncodingError: If address or position is too wide; raised
                before any hash call
        """
        position_fea = encode_storage_position(position)
        address_fea = encode_address(address)

        hk0 = self.oracle.hash(position_fea, list(ZERO_CAPACITY))
        key1 = _address_input(address_fea, LeafType.STORAGE)
        digest = self.oracle.hash(key1, list(hk0))
        logger.debug("Derived STORAGE key")
        return digest_to_key(digest)

    def derive_key(
        self,
        leaf_type: LeafType,
        address: IntLike,
        position: Optional[IntLike] = None,
    ) -> bytes:
        """
        Derive the key of any leaf type.

        A position is required for STORAGE and rejected for the others.
        """
        leaf_type = LeafType(leaf_type)
        if leaf_type == LeafType.STORAGE:
            if position is None:
                raise ValueError("storage keys require a storage position")
            return self.storage_key(address, position)

        if position is not None:
            raise ValueError(f"{leaf_type.name} keys do not take a storage position")
        return self._single_stage_key(address, leaf_type)


def derive_balance_key(oracle: HashOracle, address: IntLike) -> bytes:
    return KeyDeriver(oracle).balance_key(address)


def derive_nonce_key(oracle: HashOracle, address: IntLike) -> bytes:
    return KeyDeriver(oracle).nonce_key(address)


def derive_code_key(oracle: HashOracle, address: IntLike) -> bytes:
    return KeyDeriver(oracle).code_key(address)


def derive_storage_key(oracle: HashOracle, address: IntLike, position: IntLike) -> bytes:
    return KeyDeriver(oracle).storage_key(address, position)
