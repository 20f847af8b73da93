"""Per-worker sampler: seeding policy plus geometry-aware sampling routines.

Build one :class:`Sampler` per thread or process and never share it between
concurrently running workers. For a fleet of workers with one logical seed,
give each worker its own index::

    sampler = Sampler.create_indexed(worker_id, seed)

A seed of ``0`` means "seed from entropy": every sampler built that way is
independent and non-reproducible, and ``index`` is ignored.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.random import Generator

from vecrand.core.entropy import EntropySource
from vecrand.core.rng import UINT64_MASK, SeedPair, derive_seed_pair, make_rng

logger = logging.getLogger(__name__)

# Below this radius a Gaussian triple is too close to the origin to normalize.
_MIN_RADIUS = 1e-24


class Sampler:
    """Facade over one exclusively owned numpy Generator.

    Successive calls consume the underlying stream strictly in call order, so
    two samplers with the same seed pair return identical results for any
    identical sequence of calls. Assigning a sampler to another name shares
    the stream; use :meth:`spawn` or a new constructor call for an
    independent one.
    """

    __slots__ = ("_rng", "_seed_pair")

    def __init__(self, rng: Generator, seed_pair: SeedPair) -> None:
        self._rng = rng
        self._seed_pair = seed_pair

    # --- construction ---

    @classmethod
    def create(cls, seed: int = 0, *, entropy: EntropySource | None = None) -> Sampler:
        """Create a sampler for the single-worker (or pre-fork) case.

        Same as ``create_indexed(0, seed)``.
        """
        return cls.create_indexed(0, seed, entropy=entropy)

    @classmethod
    def create_indexed(
        cls,
        index: int,
        seed: int,
        *,
        entropy: EntropySource | None = None,
    ) -> Sampler:
        """Create the sampler for worker ``index``.

        Args:
            index: Worker index. Becomes the first seed word when ``seed`` is
                non-zero, ignored otherwise.
            seed: Shared logical seed, or ``0`` to seed from entropy.
            entropy: Source used when ``seed`` is ``0``. Defaults to the
                process-wide source.

        Returns:
            A new, independent Sampler.
        """
        pair = derive_seed_pair(index, seed, entropy)
        if seed & UINT64_MASK == 0:
            logger.debug("Entropy-seeded sampler with seed pair %s", pair)
        return cls.from_seed_pair(pair)

    @classmethod
    def from_seed_pair(cls, pair: SeedPair) -> Sampler:
        """Rebuild a sampler from a recorded seed pair."""
        return cls(make_rng(pair), pair)

    @property
    def seed_pair(self) -> SeedPair:
        """The seed pair this sampler was built from."""
        return self._seed_pair

    @property
    def generator(self) -> Generator:
        """The underlying numpy Generator (shares this sampler's stream)."""
        return self._rng

    def spawn(self, n: int) -> list[Sampler]:
        """Derive ``n`` child samplers from this sampler's stream.

        Each child takes two raw draws from the parent as its seed pair, so
        the children are reproducible whenever the parent is.
        """
        children = []
        for _ in range(n):
            pair = SeedPair(self.raw_uint64(), self.raw_uint64())
            children.append(type(self).from_seed_pair(pair))
        return children

    def __repr__(self) -> str:
        pair = self._seed_pair
        return f"{type(self).__name__}(seed_pair=({pair.seed1}, {pair.seed2}))"

    # --- primitives ---

    def uniform_float(self) -> float:
        """Uniform draw in [0, 1)."""
        return float(self._rng.random())

    def normal_float(self) -> float:
        """Standard normal draw."""
        return float(self._rng.standard_normal())

    def bounded_int(self, n: int) -> int:
        """Integer uniformly distributed in [0, n). Requires ``n > 0``."""
        return int(self._rng.integers(n))

    def raw_uint64(self) -> int:
        """Raw, untransformed 64-bit output of the bit generator."""
        return int(self._rng.bit_generator.random_raw())

    def uniform_range(self, start: float, end: float) -> float:
        """Uniform draw in [start, end).

        ``end >= start`` is the caller's responsibility. A reversed range is
        not rejected and yields a value between ``end`` and ``start``.
        """
        return start + (end - start) * self.uniform_float()

    def uniform3(self) -> tuple[float, float, float]:
        """Three independent uniform [0, 1) draws, taken in x, y, z order."""
        x = self.uniform_float()
        y = self.uniform_float()
        z = self.uniform_float()
        return x, y, z

    # --- geometry ---

    def unit_vector3(self) -> tuple[float, float, float]:
        """Uniformly distributed point on the unit sphere.

        Normalizes a triple of independent standard normals. This is faster
        than rejection in a cube and avoids the pole clustering of naive
        angle parametrization. Triples too close to the origin are redrawn.
        """
        while True:
            x = self.normal_float()
            y = self.normal_float()
            z = self.normal_float()
            radius = math.sqrt(x * x + y * y + z * z)
            if radius > _MIN_RADIUS:
                return x / radius, y / radius, z / radius

    def in_disc(self, r: float) -> tuple[float, float]:
        """Point uniformly distributed in a disc of radius ``r`` (rejection method).

        Accepts about pi/4 of the candidates drawn from the enclosing square.
        """
        while True:
            x = 2.0 * self.uniform_float() - 1.0
            y = 2.0 * self.uniform_float() - 1.0
            if x * x + y * y <= 1.0:
                return r * x, r * y

    def in_disc_angle(self, r: float) -> tuple[float, float]:
        """Point uniformly distributed in a disc of radius ``r`` (polar method).

        Always exactly two draws. The radius is ``r * sqrt(u)``: a linear
        radius would crowd the points toward the center.
        """
        theta = 2.0 * math.pi * self.uniform_float()
        radius = r * math.sqrt(self.uniform_float())
        return radius * math.cos(theta), radius * math.sin(theta)

    # --- batches ---

    def uniform3_batch(self, n: int) -> np.ndarray:
        """Array of shape (n, 3) with uniform [0, 1) components."""
        return self._rng.random((n, 3))

    def unit_vector3_batch(self, n: int) -> np.ndarray:
        """Array of shape (n, 3) with rows uniformly distributed on the unit sphere."""
        vectors = self._rng.standard_normal((n, 3))
        radii = np.linalg.norm(vectors, axis=1)
        degenerate = radii <= _MIN_RADIUS
        while degenerate.any():
            vectors[degenerate] = self._rng.standard_normal((int(degenerate.sum()), 3))
            radii[degenerate] = np.linalg.norm(vectors[degenerate], axis=1)
            degenerate = radii <= _MIN_RADIUS
        return vectors / radii[:, np.newaxis]

    def in_disc_batch(self, r: float, n: int) -> np.ndarray:
        """Array of shape (n, 2) with points in a disc of radius ``r`` (rejection method)."""
        points = np.empty((n, 2))
        filled = 0
        while filled < n:
            needed = n - filled
            # Oversample by the inverse acceptance rate.
            candidates = 2.0 * self._rng.random((int(needed * 4 / math.pi) + 8, 2)) - 1.0
            accepted = candidates[np.einsum("ij,ij->i", candidates, candidates) <= 1.0]
            take = accepted[:needed]
            points[filled : filled + len(take)] = take
            filled += len(take)
        return r * points

    def in_disc_angle_batch(self, r: float, n: int) -> np.ndarray:
        """Array of shape (n, 2) with points in a disc of radius ``r`` (polar method)."""
        draws = self._rng.random((n, 2))
        theta = 2.0 * np.pi * draws[:, 0]
        radius = r * np.sqrt(draws[:, 1])
        return np.column_stack([radius * np.cos(theta), radius * np.sin(theta)])
