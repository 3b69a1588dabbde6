"""
State-tree leaf keys

Deterministic 32-byte keys for the account leaves (balance, nonce, code,
code length, storage slots) of a Poseidon/Goldilocks sparse Merkle tree.

This package provides:
- Integer to field-element encoding
- Digest / key conversion
- Key derivation over an injectable hash oracle
- A parameterised Goldilocks Poseidon oracle

Usage:
    from smt_keys import GoldilocksPoseidon, KeyDeriver

    oracle = GoldilocksPoseidon.from_json("poseidon.json")
    deriver = KeyDeriver(oracle)
    key = deriver.balance_key("0x617b3a3528F9cDd6630fd3301B9c8911F7Bf063D")
"""

# Errors
from .errors import (
    SmtKeyError,
    EncodingError,
    FormatError,
    HashOracleError,
    ParameterError,
)

# Constants
from .constants import (
    LeafType,
    HASH_POSEIDON_ALL_ZEROES,
    KEY_SIZE,
)

# Field
from .field import GF, GOLDILOCKS_PRIME

# Encoding
from .encoding import (
    scalar_to_fea,
    address_to_int,
    storage_position_to_int,
)

# Digest codec
from .digest import (
    digest_to_key,
    hex_to_digest,
    key_to_int,
    key_to_hex,
)

# Hash oracle
from .oracle import (
    HashOracle,
    check_hash_inputs,
    verify_default_capacity,
)
from .poseidon import (
    PoseidonParams,
    GoldilocksPoseidon,
)

# Key derivation
from .keys import (
    KeyDeriver,
    default_capacity,
    derive_balance_key,
    derive_nonce_key,
    derive_code_key,
    derive_storage_key,
)

__version__ = "0.1.0"
__all__ = [
    # Errors
    "SmtKeyError",
    "EncodingError",
    "FormatError",
    "HashOracleError",
    "ParameterError",
    # Constants
    "LeafType",
    "HASH_POSEIDON_ALL_ZEROES",
    "KEY_SIZE",
    # Field
    "GF",
    "GOLDILOCKS_PRIME",
    # Encoding
    "scalar_to_fea",
    "address_to_int",
    "storage_position_to_int",
    # Digest
    "digest_to_key",
    "hex_to_digest",
    "key_to_int",
    "key_to_hex",
    # Oracle
    "HashOracle",
    "check_hash_inputs",
    "verify_default_capacity",
    "PoseidonParams",
    "GoldilocksPoseidon",
    # Keys
    "KeyDeriver",
    "default_capacity",
    "derive_balance_key",
    "derive_nonce_key",
    "derive_code_key",
    "derive_storage_key",
]
