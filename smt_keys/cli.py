"""
Command-line key derivation.

    python -m smt_keys balance 0x617b3a3528F9cDd6630fd3301B9c8911F7Bf063D --params poseidon.json
    python -m smt_keys storage 0x617b...063D 0x01 --params poseidon.json

The Poseidon parameter file can also be given via SMT_KEYS_POSEIDON_PARAMS.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .constants import LeafType
from .digest import key_to_hex
from .errors import SmtKeyError
from .keys import KeyDeriver
from .oracle import HashOracle, verify_default_capacity
from .poseidon import GoldilocksPoseidon

logger = logging.getLogger(__name__)

PARAMS_ENV_VAR = "SMT_KEYS_POSEIDON_PARAMS"

LEAF_TYPES = {
    "balance": LeafType.BALANCE,
    "nonce": LeafType.NONCE,
    "code": LeafType.CODE,
    "code-length": LeafType.SC_LENGTH,
    "storage": LeafType.STORAGE,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smt_keys",
        description="Derive state-tree leaf keys for an account",
    )
    parser.add_argument(
        'leaf_type',
        choices=sorted(LEAF_TYPES),
        help='Leaf to derive the key of'
    )
    parser.add_argument(
        'address',
        type=str,
        help='Account address (hex, 20 bytes max)'
    )
    parser.add_argument(
        'position',
        type=str,
        nargs='?',
        default=None,
        help='Storage slot (hex, 32 bytes max); storage leaves only'
    )
    parser.add_argument(
        '--params',
        type=Path,
        default=None,
        help=f'Poseidon parameter JSON file (default: ${PARAMS_ENV_VAR})'
    )
    parser.add_argument(
        '--skip-capacity-check',
        action='store_true',
        help='Do not check the parameters against the default-capacity seed'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def load_oracle(params_path: Optional[Path], check_capacity: bool = True) -> HashOracle:
    """Build the Poseidon oracle from an explicit path or the environment."""
    if params_path is None:
        env_value = os.environ.get(PARAMS_ENV_VAR)
        if not env_value:
            raise SmtKeyError(f"no Poseidon parameters: pass --params or set {PARAMS_ENV_VAR}")
        params_path = Path(env_value)

    oracle = GoldilocksPoseidon.from_json(params_path)
    if check_capacity:
        verify_default_capacity(oracle)
    return oracle


def run(args: argparse.Namespace, oracle: HashOracle) -> str:
    """Derive the requested key and return it as hex."""
    leaf_type = LEAF_TYPES[args.leaf_type]
    key = KeyDeriver(oracle).derive_key(leaf_type, args.address, args.position)
    return key_to_hex(key)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        oracle = load_oracle(args.params, check_capacity=not args.skip_capacity_check)
        print(run(args, oracle))
    except (SmtKeyError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
