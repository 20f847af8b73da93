"""Seed-pair derivation and core generator factory."""

from __future__ import annotations

from typing import NamedTuple

from numpy.random import PCG64DXSM, Generator

from vecrand.core.entropy import EntropySource, default_entropy

UINT64_MASK = (1 << 64) - 1


class SeedPair(NamedTuple):
    """Two unsigned 64-bit words that fully determine a generator stream."""

    seed1: int
    seed2: int


def derive_seed_pair(index: int, seed: int, entropy: EntropySource | None = None) -> SeedPair:
    """Apply the seeding policy.

    A non-zero ``seed`` gives the pair ``(index, seed)``, so workers sharing
    one logical seed get distinct streams through their index. A zero
    ``seed`` draws both words from ``entropy`` and ignores ``index``.

    Both inputs are taken modulo 2**64.
    """
    seed &= UINT64_MASK
    if seed == 0:
        source = entropy if entropy is not None else default_entropy()
        return SeedPair(source.uint64() & UINT64_MASK, source.uint64() & UINT64_MASK)
    return SeedPair(index & UINT64_MASK, seed)


def make_rng(pair: SeedPair) -> Generator:
    """Create a deterministic numpy Generator from a seed pair.

    The pair is packed into one 128-bit integer and fed to PCG64DXSM, whose
    SeedSequence hashing spreads even small adjacent pairs apart.
    """
    return Generator(PCG64DXSM((pair.seed1 << 64) | pair.seed2))
