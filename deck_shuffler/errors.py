"""Exception types raised by the deck shuffler."""
from __future__ import annotations


class ShufflerError(Exception):
    """Base class for every error raised by :mod:`deck_shuffler`."""


class InvalidDeckSizeError(ShufflerError, ValueError):
    """Raised when a deck is requested with fewer than the minimum cards."""

    def __init__(self, size: object, minimum: int) -> None:
        super().__init__(f"Deck size must be an integer >= {minimum}, got {size!r}")
        self.size = size
        self.minimum = minimum


class DeckNotInitializedError(ShufflerError, RuntimeError):
    """Raised when an operation needs a deck before one was generated."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() requires a deck; call generate_deck() first")
        self.operation = operation


class UnknownShuffleTypeError(ShufflerError, ValueError):
    """Raised when a shuffle type name cannot be resolved."""


class ConfigError(ShufflerError, ValueError):
    """Raised when an argument or configuration value is recognised but invalid."""


class RestorationLimitExceeded(ShufflerError, RuntimeError):
    """Raised when ``restore_deck`` hits its shuffle bound before restoring."""

    def __init__(self, shuffle_type: object, deck_size: int, attempts: int) -> None:
        super().__init__(
            f"Deck of size {deck_size} not restored after {attempts} "
            f"{getattr(shuffle_type, 'name', shuffle_type)} shuffles"
        )
        self.shuffle_type = shuffle_type
        self.deck_size = deck_size
        self.attempts = attempts


__all__ = [
    "ShufflerError",
    "InvalidDeckSizeError",
    "DeckNotInitializedError",
    "UnknownShuffleTypeError",
    "ConfigError",
    "RestorationLimitExceeded",
]
