"""Deck generation, perfect and random shuffles, and shuffle-order counting."""
from __future__ import annotations

from deck_shuffler.config import DEFAULT, MIN_DECK_SIZE, UNBOUNDED, ShufflerConfig
from deck_shuffler.errors import (
    ConfigError,
    DeckNotInitializedError,
    InvalidDeckSizeError,
    RestorationLimitExceeded,
    ShufflerError,
    UnknownShuffleTypeError,
)
from deck_shuffler.interleave import (
    copy_every_n,
    half_sizes,
    in_shuffle,
    inverse_in_shuffle,
    inverse_out_shuffle,
    out_shuffle,
)
from deck_shuffler.kinds import (
    PERFECT_SHUFFLES,
    RANDOM_SHUFFLES,
    ShuffleType,
    parse_shuffle_type,
)
from deck_shuffler.rng import RandomSource
from deck_shuffler.shuffler import DeckShuffler

__all__ = [
    "DEFAULT",
    "UNBOUNDED",
    "MIN_DECK_SIZE",
    "ShufflerConfig",
    "ConfigError",
    "DeckNotInitializedError",
    "InvalidDeckSizeError",
    "RestorationLimitExceeded",
    "ShufflerError",
    "UnknownShuffleTypeError",
    "copy_every_n",
    "half_sizes",
    "in_shuffle",
    "inverse_in_shuffle",
    "inverse_out_shuffle",
    "out_shuffle",
    "PERFECT_SHUFFLES",
    "RANDOM_SHUFFLES",
    "ShuffleType",
    "parse_shuffle_type",
    "RandomSource",
    "DeckShuffler",
]
