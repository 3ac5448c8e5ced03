"""Random engine owned by each shuffler instance."""
from __future__ import annotations

import random
import time
from typing import Any

SEED_MASK = 0xFFFFFFFFFFFFFFFF


def clock_seed() -> int:
    """Return a seed taken from the high-resolution clocks."""

    return (time.time_ns() ^ time.perf_counter_ns()) & SEED_MASK


class RandomSource:
    """Seedable wrapper around :class:`random.Random`.

    Without a seed the engine is seeded once from :func:`clock_seed`. The
    seed actually used is kept on :attr:`seed` so a surprising run can be
    replayed by passing it back in.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = clock_seed()
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"Seed must be an integer, got {type(seed).__name__}")
        self._seed = seed & SEED_MASK
        self._rng = random.Random(self._seed)

    @classmethod
    def from_random(cls, rng: random.Random) -> "RandomSource":
        """Wrap an existing :class:`random.Random` without reseeding it."""

        source = cls.__new__(cls)
        source._seed = None
        source._rng = rng
        return source

    @property
    def seed(self) -> int | None:
        return self._seed

    def randint(self, low: int, high: int) -> int:
        """Return a uniform integer in ``[low, high]`` inclusive."""
        return self._rng.randint(low, high)

    def shuffle(self, seq: list[Any]) -> None:
        self._rng.shuffle(seq)

    def state(self) -> Any:
        return self._rng.getstate()

    def set_state(self, state: Any) -> None:
        self._rng.setstate(state)


def coerce_random_source(value: Any) -> RandomSource:
    """Build a :class:`RandomSource` from a source, a ``Random`` or a seed."""

    if isinstance(value, RandomSource):
        return value
    if isinstance(value, random.Random):
        return RandomSource.from_random(value)
    return RandomSource(value)


__all__ = ["RandomSource", "clock_seed", "coerce_random_source", "SEED_MASK"]
