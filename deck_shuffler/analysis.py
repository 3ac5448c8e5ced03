"""Study helpers built on top of :class:`~deck_shuffler.shuffler.DeckShuffler`.

Two questions drive this module: how many passes of a perfect shuffle bring
a deck of a given size home (tabulated with pandas), and whether the random
shuffles place every card in every position equally often (counted with
numpy and scored with a Pearson chi-square statistic).
"""
from __future__ import annotations

import logging
import random
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from deck_shuffler.config import ShufflerConfig
from deck_shuffler.errors import ConfigError
from deck_shuffler.kinds import PERFECT_SHUFFLES, ShuffleType, parse_shuffle_type
from deck_shuffler.rng import RandomSource
from deck_shuffler.shuffler import DeckShuffler

LOGGER = logging.getLogger("deck_shuffler.analysis")

ORDER_COLUMNS = ["deck_size", "shuffle_type", "shuffle_count", "is_odd"]
SUMMARY_COLUMNS = [
    "shuffle_type",
    "min_count",
    "max_count",
    "mean_count",
    "median_count",
    "peak_deck_size",
]


def shuffle_order(
    size: int,
    shuffle_type: ShuffleType | str,
    *,
    config: ShufflerConfig | None = None,
    rng: RandomSource | random.Random | int | None = None,
) -> int:
    """Return how many passes of *shuffle_type* restore a fresh deck of *size*."""

    shuffler: DeckShuffler[int] = DeckShuffler(rng=rng, config=config)
    shuffler.generate_deck(size)
    return shuffler.restore_deck(shuffle_type)


def order_table(
    sizes: Iterable[int],
    shuffle_types: Sequence[ShuffleType | str] = PERFECT_SHUFFLES,
    *,
    config: ShufflerConfig | None = None,
) -> pd.DataFrame:
    """Tabulate restoration counts for every (size, shuffle type) pair."""

    kinds = [parse_shuffle_type(value) for value in shuffle_types]
    deck_sizes = list(sizes)
    shuffler: DeckShuffler[int] = DeckShuffler(config=config)

    rows = []
    for kind in kinds:
        for size in deck_sizes:
            shuffler.generate_deck(size)
            rows.append(
                {
                    "deck_size": size,
                    "shuffle_type": kind.value,
                    "shuffle_count": shuffler.restore_deck(kind),
                    "is_odd": shuffler.is_odd,
                }
            )
    LOGGER.debug("Computed %d restoration counts", len(rows))
    return pd.DataFrame(rows, columns=ORDER_COLUMNS)


def summarise_orders(frame: pd.DataFrame) -> pd.DataFrame:
    """Aggregate an :func:`order_table` frame per shuffle type.

    ``peak_deck_size`` is the first deck size in *frame* that needs the most
    passes.
    """

    if frame.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    # idxmax labels must be unique, which concatenated tables are not.
    frame = frame.reset_index(drop=True)
    grouped = frame.groupby("shuffle_type", sort=False)["shuffle_count"]
    summary = grouped.agg(["min", "max", "mean", "median"])
    summary.columns = ["min_count", "max_count", "mean_count", "median_count"]

    peaks = frame.loc[grouped.idxmax()].set_index("shuffle_type")["deck_size"]
    summary["peak_deck_size"] = peaks
    return summary.reset_index()[SUMMARY_COLUMNS]


def positional_frequencies(
    size: int,
    shuffle_type: ShuffleType | str,
    trials: int,
    *,
    rng: RandomSource | random.Random | int | None = None,
) -> np.ndarray:
    """Count where each card lands after one shuffle of a fresh deck.

    Returns an integer matrix where ``counts[position, card]`` is the number
    of trials that left *card* at *position*. Every row and every column sums
    to *trials*.
    """

    if trials < 1:
        raise ConfigError("trials must be at least 1")

    kind = parse_shuffle_type(shuffle_type)
    shuffler: DeckShuffler[int] = DeckShuffler(rng=rng)
    shuffler.generate_deck(size)
    positions = np.arange(size)
    counts = np.zeros((size, size), dtype=np.int64)

    for _ in range(trials):
        shuffler.reset_deck()
        shuffler.perform_shuffle(kind)
        counts[positions, shuffler.get_deck()] += 1
    return counts


def chi_square_statistic(counts: np.ndarray) -> float:
    """Return Pearson's statistic of *counts* against a uniform placement."""

    observed = np.asarray(counts, dtype=float)
    if observed.ndim != 2 or observed.shape[0] != observed.shape[1]:
        raise ConfigError("counts must be a square matrix")

    expected = observed.sum(axis=1, keepdims=True) / observed.shape[1]
    if np.any(expected <= 0):
        raise ConfigError("every position needs at least one observation")
    return float(((observed - expected) ** 2 / expected).sum())


def degrees_of_freedom(size: int) -> int:
    """Degrees of freedom for a ``size x size`` contingency table."""
    return (size - 1) ** 2


__all__ = [
    "ORDER_COLUMNS",
    "SUMMARY_COLUMNS",
    "shuffle_order",
    "order_table",
    "summarise_orders",
    "positional_frequencies",
    "chi_square_statistic",
    "degrees_of_freedom",
]
