"""Shuffle kinds understood by :class:`deck_shuffler.shuffler.DeckShuffler`."""
from __future__ import annotations

from enum import Enum
from typing import Any

from deck_shuffler.errors import UnknownShuffleTypeError


class ShuffleType(Enum):
    """The closed set of permutations the engine can apply."""

    UNIFORM_RANDOM = "uniform_random"
    FISHER_YATES = "fisher_yates"
    OUTSHUFFLE = "outshuffle"
    INSHUFFLE = "inshuffle"
    INV_OUTSHUFFLE = "inv_outshuffle"
    INV_INSHUFFLE = "inv_inshuffle"

    @property
    def is_random(self) -> bool:
        return self in RANDOM_SHUFFLES

    @property
    def inverse(self) -> "ShuffleType | None":
        """Return the kind that undoes this one, ``None`` for random kinds."""

        return _INVERSES.get(self)


ALIASES = {
    "random": ShuffleType.UNIFORM_RANDOM,
    "uniform": ShuffleType.UNIFORM_RANDOM,
    "stl": ShuffleType.UNIFORM_RANDOM,
    "stl_shuffle": ShuffleType.UNIFORM_RANDOM,
    "fy": ShuffleType.FISHER_YATES,
    "knuth": ShuffleType.FISHER_YATES,
    "out": ShuffleType.OUTSHUFFLE,
    "out_shuffle": ShuffleType.OUTSHUFFLE,
    "faro_out": ShuffleType.OUTSHUFFLE,
    "in": ShuffleType.INSHUFFLE,
    "in_shuffle": ShuffleType.INSHUFFLE,
    "faro_in": ShuffleType.INSHUFFLE,
    "inverse_outshuffle": ShuffleType.INV_OUTSHUFFLE,
    "inverse_out_shuffle": ShuffleType.INV_OUTSHUFFLE,
    "inv_out": ShuffleType.INV_OUTSHUFFLE,
    "inverse_inshuffle": ShuffleType.INV_INSHUFFLE,
    "inverse_in_shuffle": ShuffleType.INV_INSHUFFLE,
    "inv_in": ShuffleType.INV_INSHUFFLE,
}

RANDOM_SHUFFLES = frozenset({ShuffleType.UNIFORM_RANDOM, ShuffleType.FISHER_YATES})

PERFECT_SHUFFLES = (
    ShuffleType.OUTSHUFFLE,
    ShuffleType.INSHUFFLE,
    ShuffleType.INV_OUTSHUFFLE,
    ShuffleType.INV_INSHUFFLE,
)

_INVERSES = {
    ShuffleType.OUTSHUFFLE: ShuffleType.INV_OUTSHUFFLE,
    ShuffleType.INV_OUTSHUFFLE: ShuffleType.OUTSHUFFLE,
    ShuffleType.INSHUFFLE: ShuffleType.INV_INSHUFFLE,
    ShuffleType.INV_INSHUFFLE: ShuffleType.INSHUFFLE,
}


def parse_shuffle_type(value: Any) -> ShuffleType:
    """Resolve *value* into a :class:`ShuffleType`.

    Enum members pass through unchanged. Strings are matched against member
    names, member values and :data:`ALIASES` after lowercasing and folding
    spaces and dashes into underscores, so ``"Inverse Out-Shuffle"`` and
    ``"INV_OUTSHUFFLE"`` name the same kind.
    """

    if isinstance(value, ShuffleType):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Unsupported shuffle type: {type(value).__name__}")

    token = value.strip().lower().replace("-", "_").replace(" ", "_")
    if not token:
        raise UnknownShuffleTypeError("Shuffle type must not be blank")
    for member in ShuffleType:
        if token in (member.value, member.name.lower()):
            return member
    if token in ALIASES:
        return ALIASES[token]
    raise UnknownShuffleTypeError(f"Unknown shuffle type: {value!r}")


__all__ = [
    "ShuffleType",
    "ALIASES",
    "RANDOM_SHUFFLES",
    "PERFECT_SHUFFLES",
    "parse_shuffle_type",
]
