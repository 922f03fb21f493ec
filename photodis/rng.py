from __future__ import annotations

import threading
from typing import Protocol

import numpy as np


class UniformSource(Protocol):
    """Anything that hands out uniform draws in the open interval (0, 1).

    Sources that also provide ``uniform(size)`` are asked for all draws of
    one sampling step at once.
    """

    def rand(self) -> float: ...


class RandomSource:
    """Thread-safe uniform random source.

    Every thread draws from its own ``numpy.random.Generator``.  The
    generators are children of one ``SeedSequence``, so streams are
    independent across threads and a seeded source replays exactly when
    used from a single thread.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._seq = np.random.SeedSequence(seed)
        self._lock = threading.Lock()
        self._local = threading.local()

    def generator(self) -> np.random.Generator:
        gen = getattr(self._local, "gen", None)
        if gen is None:
            with self._lock:
                (child,) = self._seq.spawn(1)
            gen = np.random.default_rng(child)
            self._local.gen = gen
        return gen

    def rand(self) -> float:
        gen = self.generator()
        u = float(gen.random())
        while u == 0.0:
            u = float(gen.random())
        return u

    def uniform(self, size: int) -> np.ndarray:
        gen = self.generator()
        u = gen.random(int(size))
        zero = u == 0.0
        while np.any(zero):
            u[zero] = gen.random(int(zero.sum()))
            zero = u == 0.0
        return u


_shared: RandomSource | None = None
_shared_lock = threading.Lock()


def shared_random() -> RandomSource:
    """Process-wide default source, used when none is injected."""
    global _shared
    if _shared is None:
        with _shared_lock:
            if _shared is None:
                _shared = RandomSource()
    return _shared
