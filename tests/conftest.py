"""Shared test fixtures."""

from __future__ import annotations

import pytest

from vecrand.core.sampler import Sampler


class FixedEntropy:
    """Entropy source that replays a fixed list of values."""

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls = 0

    def uint64(self) -> int:
        value = self._values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def sampler() -> Sampler:
    """Deterministic sampler for tests."""
    return Sampler.create(42)


@pytest.fixture
def random_sampler() -> Sampler:
    """Entropy-seeded sampler, different on every run."""
    return Sampler.create(0)


@pytest.fixture
def fixed_entropy() -> type[FixedEntropy]:
    """Factory for entropy sources with known output."""
    return FixedEntropy
