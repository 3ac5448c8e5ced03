"""Configuration profiles for the deck shuffler."""
from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass
from typing import Any, Mapping, MutableMapping

from deck_shuffler.errors import ConfigError

MIN_DECK_SIZE = 3

SHUFFLE_LIMITS = {
    "unlimited": None,
    "unbounded": None,
    "infinite": None,
    "none": None,
}

RESTORE_CHECKS = ("sorted", "original")

DEFAULT_SHUFFLE_LIMIT = 100_000


def normalise_shuffle_limit(value: Any) -> int | None:
    """Convert *value* into a restoration bound.

    ``None`` means ``restore_deck`` may loop for as long as the permutation
    needs. Configuration usually arrives as JSON or user input, so integers,
    integral floats, numeric strings and the keywords in
    :data:`SHUFFLE_LIMITS` are all accepted.

    ``ConfigError`` is raised when the content is recognised but invalid (a
    negative number, a fractional float) while ``TypeError`` flags
    unsupported data types.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError("Boolean values are not valid shuffle limits")
    if isinstance(value, int):
        if value < 0:
            raise ConfigError("Shuffle limit must be non-negative")
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            raise ConfigError(f"Shuffle limit must be a whole number, got {value!r}")
        return normalise_shuffle_limit(int(value))
    if isinstance(value, str):
        token = value.strip().lower()
        if not token:
            return None
        if token in SHUFFLE_LIMITS:
            return SHUFFLE_LIMITS[token]
        try:
            parsed = int(token, 10)
        except ValueError as exc:
            raise ConfigError(f"Unknown shuffle limit value: {value!r}") from exc
        return normalise_shuffle_limit(parsed)
    raise TypeError(f"Unsupported shuffle limit type: {type(value).__name__}")


def _normalise_restore_check(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Unsupported restore check type: {type(value).__name__}")
    token = value.strip().lower()
    if token not in RESTORE_CHECKS:
        raise ConfigError(
            f"Restore check must be one of {', '.join(RESTORE_CHECKS)}; got {value!r}"
        )
    return token


@dataclass(frozen=True)
class ShufflerConfig:
    """Tunable behaviour of a :class:`~deck_shuffler.shuffler.DeckShuffler`.

    ``restore_check`` picks what "restored" means. ``"sorted"`` treats a
    non-decreasing deck as restored, which only works because generated decks
    are strictly increasing integers. ``"original"`` compares against the
    sequence produced by the last ``generate_deck`` and suits arbitrary
    element types.

    ``max_shuffles`` bounds ``restore_deck`` at :data:`DEFAULT_SHUFFLE_LIMIT`
    passes. A perfect shuffle of ``n`` cards never needs more than ``n``
    passes, so the bound only bites for random shuffles of larger decks.
    Pass ``None`` (or use :data:`UNBOUNDED`) to loop until restored.
    """

    seed: int | None = None
    max_shuffles: str | int | None = DEFAULT_SHUFFLE_LIMIT
    restore_check: str = "sorted"

    def __post_init__(self) -> None:
        normalise_shuffle_limit(self.max_shuffles)
        _normalise_restore_check(self.restore_check)
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise TypeError(f"Seed must be an integer, got {type(self.seed).__name__}")

    def to_dict(self) -> MutableMapping[str, Any]:
        """Return the config as a JSON-serialisable mapping."""
        return dict(asdict(self))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShufflerConfig":
        """Create a config from *data* produced by :meth:`to_dict`."""
        fields = {field.name for field in cls.__dataclass_fields__.values()}
        filtered = {k: data[k] for k in data if k in fields}
        return cls(**filtered)  # type: ignore[arg-type]

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, payload: str) -> "ShufflerConfig":
        return cls.from_dict(json.loads(payload))

    @property
    def shuffle_limit(self) -> int | None:
        """Return the numeric restoration bound, ``None`` when unbounded."""

        return normalise_shuffle_limit(self.max_shuffles)

    @property
    def compares_to_original(self) -> bool:
        return _normalise_restore_check(self.restore_check) == "original"


DEFAULT = ShufflerConfig()

UNBOUNDED = ShufflerConfig(max_shuffles=None)

__all__ = [
    "MIN_DECK_SIZE",
    "DEFAULT_SHUFFLE_LIMIT",
    "normalise_shuffle_limit",
    "RESTORE_CHECKS",
    "ShufflerConfig",
    "DEFAULT",
    "UNBOUNDED",
]
