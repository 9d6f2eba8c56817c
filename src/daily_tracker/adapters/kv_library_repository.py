"""Key-value implementation for the food library."""

from dataclasses import dataclass

from daily_tracker.adapters.kv_records import (
    LIBRARY_KEY,
    KeyValueRecords,
    dump_definition,
    parse_library,
)
from daily_tracker.domain.foods import FoodDefinition
from daily_tracker.services.library import LibraryRepository


@dataclass
class KeyValueLibraryRepository(LibraryRepository):
    """Stores the whole library as one JSON list."""

    records: KeyValueRecords

    def get_library(self) -> list[FoodDefinition] | None:
        return self.records.load(LIBRARY_KEY, parse_library)

    def save_library(self, foods: list[FoodDefinition]) -> None:
        self.records.set(LIBRARY_KEY, [dump_definition(food) for food in foods])
