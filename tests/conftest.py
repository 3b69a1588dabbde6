"""
Pytest configuration and shared hash-oracle test doubles.

None of these oracles is Poseidon. They stand in for it so key derivation
can be tested without the published round constants.
"""

import hashlib
import sys
from pathlib import Path
from typing import List, Sequence

import pytest

# Add the repository root to the path so the package imports without install
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from smt_keys.errors import HashOracleError
from smt_keys.field import GOLDILOCKS_PRIME
from smt_keys.oracle import HashOracle, check_hash_inputs


class Sha256Oracle(HashOracle):
    """Deterministic, collision-resistant stand-in built on SHA-256."""

    def hash(self, inputs: Sequence[int], capacity: Sequence[int]) -> List[int]:
        check_hash_inputs(inputs, capacity)
        data = b"".join(int(w).to_bytes(8, "big") for w in list(inputs) + list(capacity))
        digest = hashlib.sha256(data).digest()
        return [int.from_bytes(digest[i:i + 8], "big") % GOLDILOCKS_PRIME for i in range(0, 32, 8)]


class ProjectionOracle(HashOracle):
    """Returns [inputs[0], inputs[6], capacity[0], capacity[3]] so keys are hand-computable."""

    def hash(self, inputs: Sequence[int], capacity: Sequence[int]) -> List[int]:
        return [inputs[0], inputs[6], capacity[0], capacity[3]]


class CountingOracle(HashOracle):
    """Wraps another oracle and records every call."""

    def __init__(self, inner: HashOracle):
        self.inner = inner
        self.calls = []

    def hash(self, inputs: Sequence[int], capacity: Sequence[int]) -> List[int]:
        self.calls.append((list(inputs), list(capacity)))
        return self.inner.hash(inputs, capacity)


class FailingOracle(HashOracle):
    """Raises the same HashOracleError on every call."""

    def __init__(self):
        self.error = HashOracleError("internal computation fault")
        self.calls = 0

    def hash(self, inputs: Sequence[int], capacity: Sequence[int]) -> List[int]:
        self.calls += 1
        raise self.error


@pytest.fixture
def sha_oracle() -> Sha256Oracle:
    return Sha256Oracle()


@pytest.fixture
def projection_oracle() -> ProjectionOracle:
    return ProjectionOracle()


@pytest.fixture
def counting_oracle() -> CountingOracle:
    return CountingOracle(Sha256Oracle())


@pytest.fixture
def failing_oracle() -> FailingOracle:
    return FailingOracle()
