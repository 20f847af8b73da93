"""Process-wide entropy source used to seed non-reproducible samplers."""

from __future__ import annotations

import logging
import os
import threading
import weakref
from typing import Protocol

from numpy.random import PCG64DXSM, Generator

logger = logging.getLogger(__name__)


class EntropySource(Protocol):
    """Anything that can hand out raw unsigned 64-bit values."""

    def uint64(self) -> int:
        """Return a value in ``[0, 2**64)``."""
        ...


class ProcessEntropy:
    """Lazily initialized, thread-safe entropy source.

    The underlying generator is seeded from OS entropy the first time a
    value is requested. Draws are serialized with a lock so that several
    workers can build their samplers at the same time.

    A forked child starts over with a fresh generator of its own; otherwise
    every child would replay the parent's remaining entropy stream.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rng: Generator | None = None
        if hasattr(os, "register_at_fork"):
            reset = weakref.WeakMethod(self._reset)
            os.register_at_fork(after_in_child=lambda: _call_if_alive(reset))

    def _reset(self) -> None:
        self._lock = threading.Lock()
        self._rng = None

    def uint64(self) -> int:
        with self._lock:
            if self._rng is None:
                self._rng = Generator(PCG64DXSM())
                logger.debug("Initialized process entropy source (pid %d)", os.getpid())
            return int(self._rng.bit_generator.random_raw())


def _call_if_alive(ref: weakref.WeakMethod) -> None:
    method = ref()
    if method is not None:
        method()


_DEFAULT_ENTROPY = ProcessEntropy()


def default_entropy() -> ProcessEntropy:
    """Return the process-wide entropy source."""
    return _DEFAULT_ENTROPY
