import pytest

from deck_shuffler.interleave import (
    copy_every_n,
    half_sizes,
    in_shuffle,
    inverse_in_shuffle,
    inverse_out_shuffle,
    out_shuffle,
)
from deck_shuffler.errors import ConfigError, ShufflerError
from deck_shuffler.kinds import ShuffleType


@pytest.mark.parametrize(
    "size,shuffle_type,expected",
    [
        (8, ShuffleType.OUTSHUFFLE, (4, 4)),
        (7, ShuffleType.OUTSHUFFLE, (4, 3)),
        (7, ShuffleType.INV_OUTSHUFFLE, (4, 3)),
        (8, ShuffleType.INSHUFFLE, (4, 4)),
        (7, ShuffleType.INSHUFFLE, (3, 4)),
        (7, ShuffleType.INV_INSHUFFLE, (3, 4)),
    ],
)
def test_half_sizes_policy(size, shuffle_type, expected):
    assert half_sizes(size, shuffle_type) == expected


def test_half_sizes_rejects_random_kinds():
    with pytest.raises(ShufflerError):
        half_sizes(8, ShuffleType.FISHER_YATES)


def test_copy_every_n_splits_stride_offsets():
    leading, trailing = copy_every_n([10, 11, 12, 13, 14, 15], 0, 6)
    assert leading == [10, 12, 14]
    assert trailing == [11, 13, 15]


def test_copy_every_n_ignores_partial_block():
    leading, trailing = copy_every_n([10, 11, 12, 13, 14], 0, 5)
    assert leading == [10, 12]
    assert trailing == [11, 13]


def test_copy_every_n_honours_start_and_wider_stride():
    assert copy_every_n(list(range(7)), 1, 7) == ([1, 3, 5], [2, 4, 6])
    assert copy_every_n(list(range(7)), 0, 7, n=3) == ([0, 3], [1, 4])


@pytest.mark.parametrize(
    "start,stop,n",
    [(-1, 4, 2), (3, 2, 2), (0, 9, 2), (0, 4, 1)],
)
def test_copy_every_n_rejects_bad_arguments(start, stop, n):
    with pytest.raises(ConfigError):
        copy_every_n(list(range(8)), start, stop, n)


def test_out_shuffle_even_deck():
    deck = list(range(8))
    out_shuffle(deck)
    assert deck == [0, 4, 1, 5, 2, 6, 3, 7]


def test_out_shuffle_odd_deck_keeps_last_of_first_half_at_bottom():
    deck = list(range(7))
    out_shuffle(deck)
    # first half [0, 1, 2, 3], second half [4, 5, 6]
    assert deck[:6] == [0, 4, 1, 5, 2, 6]
    assert deck[6] == 3


def test_in_shuffle_even_deck():
    deck = list(range(8))
    in_shuffle(deck)
    assert deck == [4, 0, 5, 1, 6, 2, 7, 3]


def test_in_shuffle_odd_deck_keeps_last_of_second_half_at_bottom():
    deck = list(range(7))
    in_shuffle(deck)
    assert deck == [3, 0, 4, 1, 5, 2, 6]


def test_inverse_out_shuffle_gathers_even_then_odd_positions():
    deck = list(range(8))
    inverse_out_shuffle(deck)
    assert deck == [0, 2, 4, 6, 1, 3, 5, 7]


def test_inverse_out_shuffle_odd_deck_holds_top_card():
    deck = list(range(7))
    inverse_out_shuffle(deck)
    assert deck == [0, 2, 4, 6, 1, 3, 5]


def test_inverse_in_shuffle_odd_deck_holds_bottom_card():
    deck = list(range(7))
    inverse_in_shuffle(deck)
    assert deck == [1, 3, 5, 0, 2, 4, 6]


@pytest.mark.parametrize("size", range(3, 22))
def test_inverse_functions_undo_their_shuffle(size):
    deck = list(range(size))
    out_shuffle(deck)
    inverse_out_shuffle(deck)
    assert deck == list(range(size))

    in_shuffle(deck)
    inverse_in_shuffle(deck)
    assert deck == list(range(size))


@pytest.mark.parametrize("size", [3, 4, 9, 10])
def test_shuffle_functions_preserve_deck_length(size):
    for shuffle in (out_shuffle, in_shuffle, inverse_out_shuffle, inverse_in_shuffle):
        deck = list(range(size))
        shuffle(deck)
        assert len(deck) == size
        assert sorted(deck) == list(range(size))
