import json
import math

import pytest

from deck_shuffler.config import DEFAULT, DEFAULT_SHUFFLE_LIMIT, UNBOUNDED, ShufflerConfig
from deck_shuffler.errors import ConfigError


def test_default_profile_is_bounded_and_sorted():
    assert DEFAULT.shuffle_limit == DEFAULT_SHUFFLE_LIMIT == 100_000
    assert DEFAULT.seed is None
    assert not DEFAULT.compares_to_original


def test_unbounded_profile_opts_out_of_the_bound():
    assert UNBOUNDED.shuffle_limit is None
    assert ShufflerConfig(max_shuffles=None).shuffle_limit is None


def test_serialisation_round_trip():
    config = ShufflerConfig(seed=42, max_shuffles=500, restore_check="original")
    payload = config.to_json()
    restored = ShufflerConfig.from_json(payload)
    assert restored == config
    assert json.loads(payload)["max_shuffles"] == 500


def test_from_dict_ignores_unknown_keys():
    config = ShufflerConfig.from_dict({"seed": 3, "colour": "red"})
    assert config == ShufflerConfig(seed=3)


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, None),
        (0, 0),
        (12, 12),
        (12.0, 12),
        ("40", 40),
        ("  ", None),
        ("unlimited", None),
        ("Infinite", None),
        ("none", None),
    ],
)
def test_shuffle_limit_normalisation(value, expected):
    assert ShufflerConfig(max_shuffles=value).shuffle_limit == expected


@pytest.mark.parametrize(
    "value,expected_exception",
    [
        (-1, ConfigError),
        ("-1", ConfigError),
        ("bogus", ConfigError),
        (3.5, ConfigError),
        (math.nan, ConfigError),
        (math.inf, ConfigError),
        (True, TypeError),
        ([10], TypeError),
    ],
)
def test_invalid_shuffle_limits_raise(value, expected_exception):
    with pytest.raises(expected_exception):
        ShufflerConfig(max_shuffles=value)


def test_config_errors_are_value_errors():
    with pytest.raises(ValueError):
        ShufflerConfig(max_shuffles="bogus")


@pytest.mark.parametrize("value", ["original", " ORIGINAL "])
def test_restore_check_accepts_original(value):
    assert ShufflerConfig(restore_check=value).compares_to_original


@pytest.mark.parametrize(
    "value,expected_exception",
    [("identity", ConfigError), ("", ConfigError), (None, TypeError)],
)
def test_invalid_restore_check_raises(value, expected_exception):
    with pytest.raises(expected_exception):
        ShufflerConfig(restore_check=value)


@pytest.mark.parametrize("seed", ["7", 1.5, False])
def test_invalid_seed_raises(seed):
    with pytest.raises(TypeError):
        ShufflerConfig(seed=seed)
