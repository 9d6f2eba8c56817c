"""Services for managing the reusable food library."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from daily_tracker.domain.foods import FoodDefinition
from daily_tracker.services.storage import load_or_seed

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY: tuple[FoodDefinition, ...] = (
    FoodDefinition("Smoked Turkey (100 g)", 100, 16, 1, 3),
    FoodDefinition("Kashkawan Cheese (50 g)", 180, 12, 1, 14),
    FoodDefinition("Oat Loaf", 140, 5, 25, 2),
    FoodDefinition("Chicken Breast (200 g, raw)", 240, 46, 0, 4),
    FoodDefinition("Olive Oil (1 tsp, with chicken)", 40, 0, 0, 4.5),
    FoodDefinition("Potato (300 g, raw)", 258, 7, 60, 0.4),
    FoodDefinition("Taanayel Greek Yogurt Cup", 128, 10, 6, 5),
    FoodDefinition("Tuna Can", 145, 24, 0, 1),
    FoodDefinition("Olive Oil (1 tsp, with tuna)", 40, 0, 0, 4.5),
    FoodDefinition("Lettuce (100 g)", 15, 1, 3, 0),
    FoodDefinition("Banana (medium ~120 g)", 105, 1, 27, 0),
    FoodDefinition("Apple (medium ~150 g)", 95, 0, 25, 0),
    FoodDefinition("Almonds (15 g)", 87, 3, 3, 7),
    FoodDefinition("Whey Protein (1 scoop)", 130, 30, 3, 2),
    FoodDefinition("Lactose-Free Milk (250 ml)", 117, 8, 12, 4),
)


class LibraryRepository(Protocol):
    """Persistence interface for the food library."""

    def get_library(self) -> list[FoodDefinition] | None:
        """Return the stored library, or None when it was never saved."""

    def save_library(self, foods: list[FoodDefinition]) -> None:
        """Replace the stored library."""


@dataclass
class LibraryService:
    """Application service for library operations."""

    repository: LibraryRepository
    seed: tuple[FoodDefinition, ...] = field(default=DEFAULT_LIBRARY)

    def load_library(self) -> list[FoodDefinition]:
        """Return the stored library, persisting the built-in seed on first run."""
        return load_or_seed(
            self.repository.get_library,
            self.repository.save_library,
            lambda: list(self.seed),
        )

    def add_if_new(self, entry: FoodDefinition) -> bool:
        """Append an entry unless it is unnamed or its name is already taken."""
        if not entry.name.strip():
            return False
        library = self.load_library()
        if any(existing.matches(entry.name) for existing in library):
            return False
        self.repository.save_library([*library, entry])
        logger.info("Added %r to the food library", entry.name)
        return True

    def find(self, name: str) -> FoodDefinition | None:
        """Return the library entry with a matching name, ignoring case."""
        for entry in self.load_library():
            if entry.matches(name):
                return entry
        return None
