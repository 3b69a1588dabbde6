"""
Poseidon hash over the Goldilocks field.

Width-12 permutation used by the state tree: 8 rate lanes followed by 4
capacity lanes, S-box x^7, full rounds split evenly around the partial
rounds, and a dense MDS layer. The first 4 lanes of the final state are
the digest.

Round constants and the MDS matrix are not bundled: they are loaded from a
JSON parameter file published alongside the reference tree, e.g.

    {"rounds_f": 8, "rounds_p": 22, "C": [...360 ints...], "M": [[...12...], ...]}

Values may be ints or hex/decimal strings.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

from .constants import CAPACITY_SIZE, DIGEST_SIZE, HASH_INPUT_SIZE
from .errors import ParameterError
from .field import GF, from_field_array, is_field_element, to_field_array
from .oracle import HashOracle, check_hash_inputs

logger = logging.getLogger(__name__)

# Sponge width: rate + capacity
WIDTH = HASH_INPUT_SIZE + CAPACITY_SIZE

# Default round counts for width 12
ROUNDS_F = 8
ROUNDS_P = 22


def _parse_value(raw: Union[int, str]) -> int:
    if isinstance(raw, bool):
        raise ParameterError(f"invalid parameter value: {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(raw, 0)
        except (TypeError, ValueError):
            raise ParameterError(f"invalid parameter value: {raw!r}") from None
    if not is_field_element(value):
        raise ParameterError(f"parameter {value} is not below the Goldilocks prime")
    return value


def _parse_round_count(raw, name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ParameterError(f"{name} must be an integer, got {raw!r}")
    return raw


@dataclass(frozen=True)
class PoseidonParams:
    """Round counts, round constants and MDS matrix of a width-12 Poseidon."""

    rounds_f: int
    rounds_p: int
    round_constants: tuple
    mds: tuple

    def __post_init__(self):
        if self.rounds_f <= 0 or self.rounds_f % 2 != 0:
            raise ParameterError(f"rounds_f must be positive and even, got {self.rounds_f}")
        if self.rounds_p < 0:
            raise ParameterError(f"rounds_p must be non-negative, got {self.rounds_p}")

        expected = WIDTH * (self.rounds_f + self.rounds_p)
        if len(self.round_constants) != expected:
            raise ParameterError(
                f"expected {expected} round constants, got {len(self.round_constants)}"
            )
        if len(self.mds) != WIDTH or any(len(row) != WIDTH for row in self.mds):
            raise ParameterError(f"MDS matrix must be {WIDTH}x{WIDTH}")

    @property
    def n_rounds(self) -> int:
        return self.rounds_f + self.rounds_p

    @classmethod
    def from_dict(cls, data: dict) -> "PoseidonParams":
        """Build parameters from a decoded JSON object."""
        try:
            rounds_f = _parse_round_count(data.get("rounds_f", ROUNDS_F), "rounds_f")
            rounds_p = _parse_round_count(data.get("rounds_p", ROUNDS_P), "rounds_p")
            constants = tuple(_parse_value(c) for c in data["C"])
            mds = tuple(tuple(_parse_value(v) for v in row) for row in data["M"])
        except KeyError as e:
            raise ParameterError(f"missing Poseidon parameter {e}") from None
        except TypeError as e:
            raise ParameterError(f"malformed Poseidon parameters: {e}") from None

        return cls(rounds_f=rounds_f, rounds_p=rounds_p, round_constants=constants, mds=mds)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "PoseidonParams":
        """Load parameters from a JSON file."""
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ParameterError(f"{path} is not valid JSON: {e}") from None

        if not isinstance(data, dict):
            raise ParameterError(f"{path} must contain a JSON object")

        params = cls.from_dict(data)
        logger.info(
            "Loaded Poseidon parameters from %s (rounds_f=%d, rounds_p=%d)",
            path, params.rounds_f, params.rounds_p,
        )
        return params


class GoldilocksPoseidon(HashOracle):
    """
    Poseidon permutation over GF(p) used as a HashOracle.

    Each round adds the round's 12 constants, applies x^7 (to every lane
    in a full round, lane 0 only in a partial round), then mixes the state
    as a row vector times the MDS matrix.
    """

    def __init__(self, params: PoseidonParams):
        self.params = params
        self._constants = to_field_array(params.round_constants).reshape(params.n_rounds, WIDTH)
        # Transposed so that mixing is a plain matrix-vector product
        self._mix = GF([list(row) for row in params.mds]).T
        self._half_f = params.rounds_f // 2

    def _is_full_round(self, r: int) -> bool:
        return r < self._half_f or r >= self._half_f + self.params.rounds_p

    def permute(self, state: Sequence[int]) -> List[int]:
        """
        Apply the full permutation to a 12-element state.

        Args:
            state: 12 canonical field elements

        Returns:
            The 12 permuted field elements
        """
        if len(state) != WIDTH:
            raise ValueError(f"state must have {WIDTH} elements, got {len(state)}")

        s = to_field_array(state)
        for r in range(self.params.n_rounds):
            s = s + self._constants[r]
            if self._is_full_round(r):
                s = s ** 7
            else:
                s[0] = s[0] ** 7
            s = self._mix @ s
        return from_field_array(s)

    def hash(self, inputs: Sequence[int], capacity: Sequence[int]) -> List[int]:
        check_hash_inputs(inputs, capacity)
        state = list(inputs) + list(capacity)
        return self.permute(state)[:DIGEST_SIZE]

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "GoldilocksPoseidon":
        return cls(PoseidonParams.from_json(path))


__all__ = [
    "PoseidonParams",
    "GoldilocksPoseidon",
    "ROUNDS_F",
    "ROUNDS_P",
    "WIDTH",
]
