"""Deck engine: generation, shuffling and restoration counting."""
from __future__ import annotations

import logging
import random
from typing import Any, Callable, Generic, TypeVar

from deck_shuffler.config import (
    DEFAULT,
    MIN_DECK_SIZE,
    ShufflerConfig,
    normalise_shuffle_limit,
)
from deck_shuffler.errors import (
    ConfigError,
    DeckNotInitializedError,
    InvalidDeckSizeError,
    RestorationLimitExceeded,
)
from deck_shuffler.interleave import PERFECT_SHUFFLE_FUNCTIONS, half_sizes
from deck_shuffler.kinds import ShuffleType, parse_shuffle_type
from deck_shuffler.rng import RandomSource, coerce_random_source

T = TypeVar("T")

LOGGER = logging.getLogger("deck_shuffler.shuffler")

_USE_CONFIG = object()


def _identity(index: int) -> Any:
    return index


class DeckShuffler(Generic[T]):
    """Owns one deck and applies shuffles to it in place.

    Decks hold ``element_factory(0) .. element_factory(size - 1)``; the
    default factory yields the integers ``0 .. size - 1``. The random engine
    is created once per instance from *rng* (a :class:`RandomSource`, a
    :class:`random.Random` or an integer seed), falling back to
    ``config.seed`` and then to a clock-derived seed.
    """

    MIN_DECK_SIZE = MIN_DECK_SIZE

    def __init__(
        self,
        *,
        rng: RandomSource | random.Random | int | None = None,
        config: ShufflerConfig | None = None,
        element_factory: Callable[[int], T] | None = None,
    ) -> None:
        self.config = config if config is not None else DEFAULT
        self._rng = coerce_random_source(rng if rng is not None else self.config.seed)
        self._element_factory = element_factory or _identity

        self._deck: list[T] = []
        self._original: list[T] = []
        self._deck_size = 0
        self._is_odd = False
        self._first_half_size = 0
        self._second_half_size = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def deck_size(self) -> int:
        return self._deck_size

    @property
    def is_odd(self) -> bool:
        return self._is_odd

    @property
    def first_half_size(self) -> int:
        """Size of the top half of an out-shuffle split, ``ceil(n / 2)``."""
        return self._first_half_size

    @property
    def second_half_size(self) -> int:
        """Size of the bottom half of an out-shuffle split, ``floor(n / 2)``."""
        return self._second_half_size

    @property
    def has_deck(self) -> bool:
        return bool(self._deck)

    # ------------------------------------------------------------------
    # Deck lifecycle
    # ------------------------------------------------------------------
    def generate_deck(self, size: int) -> list[T]:
        """Replace the current deck with a fresh canonical deck of *size*.

        Raises :class:`InvalidDeckSizeError` for sizes below
        :data:`MIN_DECK_SIZE`; the existing deck, if any, is kept intact.
        """

        if isinstance(size, bool) or not isinstance(size, int) or size < MIN_DECK_SIZE:
            raise InvalidDeckSizeError(size, MIN_DECK_SIZE)

        deck = [self._element_factory(index) for index in range(size)]
        self._deck = deck
        self._original = list(deck)
        self._deck_size = size
        self._is_odd = size % 2 == 1
        self._first_half_size, self._second_half_size = half_sizes(
            size, ShuffleType.OUTSHUFFLE
        )
        LOGGER.debug("Generated deck of %d cards (odd=%s)", size, self._is_odd)
        return list(deck)

    def reset_deck(self) -> list[T]:
        """Regenerate a canonical deck of the current size."""

        self._require_deck("reset_deck")
        return self.generate_deck(self._deck_size)

    def get_deck(self) -> list[T]:
        return list(self._deck)

    def is_deck_restored(self) -> bool:
        """Return ``True`` when the deck is back in its generated order.

        With the default ``"sorted"`` check this is a sortedness test, which
        is only a stand-in for "original order" because generated decks are
        strictly increasing integers. Configure ``restore_check="original"``
        for element types without that property.
        """

        self._require_deck("is_deck_restored")
        if self.config.compares_to_original:
            return self._deck == self._original
        deck = self._deck
        return all(deck[i] <= deck[i + 1] for i in range(len(deck) - 1))

    # ------------------------------------------------------------------
    # Shuffling
    # ------------------------------------------------------------------
    def perform_shuffle(self, shuffle_type: ShuffleType | str) -> None:
        """Apply one pass of *shuffle_type* to the deck in place."""

        kind = parse_shuffle_type(shuffle_type)
        self._require_deck("perform_shuffle")

        if kind is ShuffleType.UNIFORM_RANDOM:
            self._rng.shuffle(self._deck)
        elif kind is ShuffleType.FISHER_YATES:
            self._fisher_yates()
        else:
            PERFECT_SHUFFLE_FUNCTIONS[kind](self._deck)

    def _fisher_yates(self) -> None:
        deck = self._deck
        for i in range(len(deck) - 1, 0, -1):
            j = self._rng.randint(0, i)
            deck[i], deck[j] = deck[j], deck[i]

    def restore_deck(
        self, shuffle_type: ShuffleType | str, max_shuffles: Any = _USE_CONFIG
    ) -> int:
        """Shuffle until the deck is restored and return the shuffle count.

        The deck is always shuffled at least once before the first check,
        so calling this on a restored deck measures a full cycle. The loop
        stops at *max_shuffles* passes, or ``config.max_shuffles`` when the
        argument is omitted; ``None`` removes the limit. Hitting the limit
        raises :class:`RestorationLimitExceeded` and leaves the deck as the
        last shuffle produced it.
        """

        kind = parse_shuffle_type(shuffle_type)
        self._require_deck("restore_deck")
        if max_shuffles is _USE_CONFIG:
            limit = self.config.shuffle_limit
        else:
            limit = normalise_shuffle_limit(max_shuffles)
        if limit is not None and limit < 1:
            raise ConfigError("max_shuffles must allow at least one shuffle")

        shuffles = 0
        while True:
            shuffles += 1
            self.perform_shuffle(kind)
            if self.is_deck_restored():
                break
            if limit is not None and shuffles >= limit:
                LOGGER.warning(
                    "Giving up on %s after %d shuffles of a %d-card deck",
                    kind.name,
                    shuffles,
                    self._deck_size,
                )
                raise RestorationLimitExceeded(kind, self._deck_size, shuffles)

        LOGGER.debug(
            "%s restored a %d-card deck after %d shuffles",
            kind.name,
            self._deck_size,
            shuffles,
        )
        return shuffles

    def _require_deck(self, operation: str) -> None:
        if not self.has_deck:
            raise DeckNotInitializedError(operation)


__all__ = ["DeckShuffler", "MIN_DECK_SIZE"]
