"""Domain model for a single day's ledger."""

from dataclasses import dataclass, field
from datetime import date

from daily_tracker.domain.foods import FoodInstance


@dataclass(frozen=True)
class Day:
    """All food lines planned for one calendar date."""

    date: date
    items: list[FoodInstance] = field(default_factory=list)

    @property
    def key(self) -> str:
        """Return the ISO date used as the storage identity."""
        return self.date.isoformat()

    def find_item(self, item_id: str) -> FoodInstance | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None
