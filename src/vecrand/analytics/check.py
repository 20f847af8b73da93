"""Unit-sphere uniformity check run across per-worker samplers."""

from __future__ import annotations

from vecrand.analytics.moments import SphereMoments, combine_moments, sphere_moments
from vecrand.config.schema import CheckConfig
from vecrand.core.entropy import EntropySource
from vecrand.core.pool import run_per_worker
from vecrand.core.sampler import Sampler
from vecrand.utils.exceptions import SamplingError


def split_samples(samples: int, workers: int) -> list[int]:
    """Split ``samples`` into ``workers`` shares differing by at most one."""
    base, extra = divmod(samples, workers)
    return [base + 1 if i < extra else base for i in range(workers)]


def run_sphere_check(config: CheckConfig, entropy: EntropySource | None = None) -> SphereMoments:
    """Draw ``config.samples`` unit vectors across ``config.workers`` samplers.

    Each worker draws its share with its own indexed sampler; the per-worker
    moments are then pooled.
    """
    workers = min(config.workers, config.samples)
    shares = split_samples(config.samples, workers)

    def work(sampler: Sampler, index: int) -> SphereMoments:
        return sphere_moments(sampler.unit_vector3_batch(shares[index]))

    parts = run_per_worker(work, workers, config.seed, entropy=entropy)
    return combine_moments(parts)


def assert_uniform_sphere(moments: SphereMoments, config: CheckConfig) -> None:
    """Raise if the moments are not those of a uniform unit sphere.

    Raises:
        SamplingError: Listing every failed tolerance.
    """
    problems = moments.failures(
        mean_tolerance=config.mean_tolerance,
        variance_tolerance=config.variance_tolerance,
        octant_tolerance=config.octant_tolerance,
    )
    if moments.max_length_error > 1e-9:
        problems.append(f"max |length - 1| = {moments.max_length_error:.3e}, want <= 1e-9")
    if problems:
        raise SamplingError("; ".join(problems))
