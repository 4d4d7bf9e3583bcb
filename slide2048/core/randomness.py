"""
Random sources used to spawn new tiles.

The grid logic never draws random numbers itself: it asks a ``RandomSource`` to pick a cell and to
flip the biased coin that chooses between a 2 and a 4. Tests inject a deterministic source.
"""

from typing import Protocol

from numpy.random import PCG64DXSM, Generator, default_rng


class RandomSource(Protocol):
    """Capability used by the tile spawner."""

    def choice(self, n: int) -> int:
        """Pick an index uniformly in ``[0, n)``."""

    def coin(self, probability: float) -> bool:
        """Return True with the given probability."""


class NumpyRandomSource:
    """
    Random source backed by a NumPy generator.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games. By default the generator is seeded from the OS entropy pool.
    """

    def __init__(self, seed: int | None = None):
        self._generator: Generator = default_rng(PCG64DXSM(seed))

    def choice(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f'n must be > 0, got {n}')
        return int(self._generator.integers(n))

    def coin(self, probability: float) -> bool:
        return bool(self._generator.random() < probability)
