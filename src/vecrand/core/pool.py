"""Per-worker sampler fleets."""

from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Callable
from typing import TypeVar

from vecrand.core.entropy import EntropySource
from vecrand.core.sampler import Sampler

logger = logging.getLogger(__name__)

T = TypeVar("T")


def spawn_samplers(
    n_workers: int,
    seed: int,
    *,
    entropy: EntropySource | None = None,
) -> list[Sampler]:
    """Build one sampler per worker, using the worker number as its index."""
    return [Sampler.create_indexed(i, seed, entropy=entropy) for i in range(n_workers)]


def run_per_worker(
    fn: Callable[[Sampler, int], T],
    n_workers: int,
    seed: int,
    *,
    max_workers: int | None = None,
    entropy: EntropySource | None = None,
) -> list[T]:
    """Run ``fn(sampler, worker_index)`` once per worker.

    Every call gets its own sampler, so with a non-zero ``seed`` the results
    do not depend on how the threads are scheduled.

    Args:
        fn: Work function. Must only touch the sampler it is handed.
        n_workers: Number of logical workers (and samplers).
        seed: Shared logical seed, ``0`` for entropy seeding.
        max_workers: Thread pool size. ``None`` lets the executor decide;
            ``1`` runs the workers sequentially in the calling thread.
        entropy: Entropy source for ``seed == 0``.

    Returns:
        The results of ``fn`` in worker index order.
    """
    samplers = spawn_samplers(n_workers, seed, entropy=entropy)

    if max_workers == 1:
        return [fn(sampler, i) for i, sampler in enumerate(samplers)]

    logger.debug("Fanning out %d workers (max_workers=%s)", n_workers, max_workers)
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(fn, sampler, i) for i, sampler in enumerate(samplers)]
        return [future.result() for future in futures]
