"""Key-value storage abstractions."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Text storage addressed by key."""

    def get(self, key: str) -> str | None:
        """Return the stored text for a key, or None when unset."""

    def set(self, key: str, value: str) -> None:
        """Replace the stored text for a key."""

    def has(self, key: str) -> bool:
        """Return True when a value is stored for the key."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store, used for tests and throwaway sessions."""

    _values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def has(self, key: str) -> bool:
        return key in self._values


def load_or_seed(
    load: Callable[[], T | None],
    save: Callable[[T], None],
    seed: Callable[[], T],
) -> T:
    """Return the loaded value, or build, persist and return the seed."""
    existing = load()
    if existing is not None:
        return existing
    value = seed()
    save(value)
    logger.info("Seeded missing value with %s", type(value).__name__)
    return value
