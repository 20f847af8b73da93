"""Distribution statistics for checking sampler output."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SphereMoments:
    """Moments of a set of points on the unit sphere."""

    n_samples: int
    mean: tuple[float, float, float]
    variance: tuple[float, float, float]
    octant_counts: tuple[int, ...]
    max_length_error: float

    def failures(
        self,
        mean_tolerance: float = 0.015,
        variance_tolerance: float = 0.01,
        octant_tolerance: float = 0.15,
    ) -> list[str]:
        """List every moment that is out of tolerance for a uniform sphere.

        Uniform points have zero mean, per-axis variance 1/3 and an equal
        share of points in each octant.

        Returns:
            Human readable descriptions of the failures, empty if all pass.
        """
        problems: list[str] = []
        for axis, m in zip("xyz", self.mean):
            if abs(m) > mean_tolerance:
                problems.append(f"mean {axis} = {m:.6f}, want 0 within {mean_tolerance}")
        for axis, v in zip("xyz", self.variance):
            if abs(v - 1.0 / 3.0) > variance_tolerance:
                problems.append(
                    f"variance {axis} = {v:.6f}, want {1.0 / 3.0:.6f} within {variance_tolerance}"
                )
        expected = self.n_samples / 8
        for octant, count in enumerate(self.octant_counts):
            if abs(count - expected) > expected * octant_tolerance:
                problems.append(f"octant {octant}: {count} points, want about {expected:.0f}")
        return problems


def octant_index(points: np.ndarray) -> np.ndarray:
    """Octant of each row: bit 0 for x > 0, bit 1 for y > 0, bit 2 for z > 0."""
    positive = points > 0
    return positive[:, 0] * 1 + positive[:, 1] * 2 + positive[:, 2] * 4


def sphere_moments(points: np.ndarray) -> SphereMoments:
    """Compute the moments of an (n, 3) array of unit vectors."""
    lengths = np.linalg.norm(points, axis=1)
    counts = np.bincount(octant_index(points), minlength=8)
    mean = points.mean(axis=0)
    variance = points.var(axis=0)
    return SphereMoments(
        n_samples=len(points),
        mean=(float(mean[0]), float(mean[1]), float(mean[2])),
        variance=(float(variance[0]), float(variance[1]), float(variance[2])),
        octant_counts=tuple(int(c) for c in counts),
        max_length_error=float(np.abs(lengths - 1.0).max()) if len(points) else 0.0,
    )


def combine_moments(parts: list[SphereMoments]) -> SphereMoments:
    """Pool moments computed separately by several workers."""
    total = sum(p.n_samples for p in parts)
    weights = np.array([p.n_samples for p in parts], dtype=float) / total
    means = np.array([p.mean for p in parts])
    # E[x^2] per part, then pooled variance around the pooled mean
    second = np.array([p.variance for p in parts]) + means**2
    mean = weights @ means
    variance = weights @ second - mean**2
    counts = np.sum([p.octant_counts for p in parts], axis=0)
    return SphereMoments(
        n_samples=total,
        mean=(float(mean[0]), float(mean[1]), float(mean[2])),
        variance=(float(variance[0]), float(variance[1]), float(variance[2])),
        octant_counts=tuple(int(c) for c in counts),
        max_length_error=max(p.max_length_error for p in parts),
    )


def mean_squared_radius(points: np.ndarray) -> float:
    """Mean of x^2 + y^2 over an (n, 2) array.

    For points uniform over the area of a disc of radius r this tends to
    r^2 / 2; a radius-uniform sampler gives r^2 / 3 instead.
    """
    return float(np.einsum("ij,ij->i", points, points).mean())
