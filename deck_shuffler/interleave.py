"""Perfect-shuffle permutations on plain lists.

Everything here is a pure data transformation: the functions take the list to
permute and mutate it in place, without knowing anything about the engine
that owns it. Two conventions matter for round trips:

* Out-shuffles split the deck into ``ceil(n / 2)`` then ``floor(n / 2)``
  cards; in-shuffles split ``floor(n / 2)`` then ``ceil(n / 2)``.
* Only ``n // 2`` pairs are ever interleaved. When ``n`` is odd the single
  leftover card is the last card of the larger half, which stays at the end
  (out-shuffle: also the first position never moves).
"""
from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from deck_shuffler.errors import ConfigError
from deck_shuffler.kinds import ShuffleType

T = TypeVar("T")


def half_sizes(size: int, shuffle_type: ShuffleType) -> tuple[int, int]:
    """Return ``(first_half, second_half)`` sizes for *shuffle_type*."""

    if shuffle_type in (ShuffleType.OUTSHUFFLE, ShuffleType.INV_OUTSHUFFLE):
        first = (size + 1) // 2
    elif shuffle_type in (ShuffleType.INSHUFFLE, ShuffleType.INV_INSHUFFLE):
        first = size // 2
    else:
        raise ConfigError(f"{shuffle_type.name} does not split the deck into halves")
    return first, size - first


def copy_every_n(
    source: Sequence[T], start: int, stop: int, n: int = 2
) -> tuple[list[T], list[T]]:
    """Split ``source[start:stop]`` into its stride offsets 0 and 1.

    The range is walked in blocks of *n*; the first item of each block goes
    to the first list and the second item to the second list, preserving
    relative order. A trailing partial block is ignored, so with ``n == 2``
    an odd-length range drops its last item.
    """

    if n < 2:
        raise ConfigError("n must be at least 2")
    if not 0 <= start <= stop <= len(source):
        raise ConfigError(
            f"Invalid range [{start}:{stop}] for a sequence of length {len(source)}"
        )

    blocks = (stop - start) // n
    leading = [source[start + block * n] for block in range(blocks)]
    trailing = [source[start + block * n + 1] for block in range(blocks)]
    return leading, trailing


def out_shuffle(deck: list[T]) -> None:
    """Interleave the halves with the first half's card on top of each pair."""

    size = len(deck)
    first_size, second_size = half_sizes(size, ShuffleType.OUTSHUFFLE)
    first_half = deck[:first_size]
    second_half = deck[first_size:]

    for i in range(min(first_size, second_size)):
        deck[2 * i] = first_half[i]
        deck[2 * i + 1] = second_half[i]

    if size % 2:
        deck[size - 1] = first_half[first_size - 1]


def in_shuffle(deck: list[T]) -> None:
    """Interleave the halves with the second half's card on top of each pair."""

    size = len(deck)
    first_size, second_size = half_sizes(size, ShuffleType.INSHUFFLE)
    first_half = deck[:first_size]
    second_half = deck[first_size:]

    for i in range(min(first_size, second_size)):
        deck[2 * i] = second_half[i]
        deck[2 * i + 1] = first_half[i]

    if size % 2:
        deck[size - 1] = second_half[second_size - 1]


def inverse_out_shuffle(deck: list[T]) -> None:
    """Undo :func:`out_shuffle`.

    Even positions gather into the first half and odd positions into the
    second. For an odd deck the top card is already in place, so the
    de-interleave starts at position 1.
    """

    size = len(deck)
    pairs = size // 2
    if size % 2:
        leading, trailing = copy_every_n(deck, 1, size)
        deck[1 : 1 + pairs] = trailing
        deck[1 + pairs :] = leading
    else:
        leading, trailing = copy_every_n(deck, 0, size)
        deck[:pairs] = leading
        deck[pairs:] = trailing


def inverse_in_shuffle(deck: list[T]) -> None:
    """Undo :func:`in_shuffle`.

    Odd positions gather into the first half and even positions into the
    second. For an odd deck the bottom card is already in place and is left
    out of the de-interleave.
    """

    size = len(deck)
    pairs = size // 2
    stop = size - 1 if size % 2 else size
    leading, trailing = copy_every_n(deck, 0, stop)
    deck[:pairs] = trailing
    deck[pairs : 2 * pairs] = leading


PERFECT_SHUFFLE_FUNCTIONS: dict[ShuffleType, Callable[[list], None]] = {
    ShuffleType.OUTSHUFFLE: out_shuffle,
    ShuffleType.INSHUFFLE: in_shuffle,
    ShuffleType.INV_OUTSHUFFLE: inverse_out_shuffle,
    ShuffleType.INV_INSHUFFLE: inverse_in_shuffle,
}


__all__ = [
    "half_sizes",
    "copy_every_n",
    "out_shuffle",
    "in_shuffle",
    "inverse_out_shuffle",
    "inverse_in_shuffle",
    "PERFECT_SHUFFLE_FUNCTIONS",
]
