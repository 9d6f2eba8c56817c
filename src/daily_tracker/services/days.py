"""Day ledger service: building a day's plan and tracking consumption."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Protocol
from uuid import uuid4

from daily_tracker.domain.days import Day
from daily_tracker.domain.foods import FoodDefinition, FoodInstance
from daily_tracker.domain.numbers import (
    clamp,
    round_servings,
    to_float,
    to_non_negative,
)
from daily_tracker.domain.templates import TemplateEntry
from daily_tracker.services.library import LibraryService
from daily_tracker.services.storage import load_or_seed

IdGenerator = Callable[[], str]

logger = logging.getLogger(__name__)


def uuid_id_generator() -> str:
    """Return a random opaque identifier for a food line."""
    return str(uuid4())


class DayRepository(Protocol):
    """Persistence interface for day ledgers."""

    def get_day(self, day: date) -> Day | None:
        """Return the stored day, or None when it was never created."""

    def save_day(self, day: Day) -> None:
        """Replace the stored day."""


@dataclass
class DayLedgerService:
    """Owns the food lines of each day and every change to their servings.

    Every operation persists the resulting day before returning it, so the
    returned value is always what storage holds. Operations addressing an
    unknown item id return the day unchanged without writing.
    """

    repository: DayRepository
    library_service: LibraryService
    id_generator: IdGenerator = field(default=uuid_id_generator)

    def create_from_library(
        self, day: date, library: Sequence[FoodDefinition] | None = None
    ) -> Day:
        """Create a day with one line per library entry, overwriting storage."""
        created = self._build_from_library(day, library)
        self.repository.save_day(created)
        return created

    def create_from_template(self, day: date, template: Sequence[TemplateEntry]) -> Day:
        """Create a day from a saved template, overwriting storage."""
        created = Day(
            date=day,
            items=[
                FoodInstance.from_definition(
                    self.id_generator(),
                    entry.definition(),
                    planned_servings=round_servings(
                        to_non_negative(entry.planned_servings)
                    ),
                )
                for entry in template
            ],
        )
        self.repository.save_day(created)
        logger.info(
            "Created %s from template with %d items", created.key, len(template)
        )
        return created

    def load_or_create(
        self, day: date, library: Sequence[FoodDefinition] | None = None
    ) -> Day:
        """Return the stored day, creating it from the library on first access."""
        return load_or_seed(
            lambda: self.repository.get_day(day),
            self.repository.save_day,
            lambda: self._build_from_library(day, library),
        )

    def reset_to_library(
        self, day: date, library: Sequence[FoodDefinition] | None = None
    ) -> Day:
        """Discard the day's lines and reseed it from the full library."""
        return self.create_from_library(day, library)

    def add_item(
        self,
        day: Day,
        entry: FoodDefinition,
        planned_servings: object = 1.0,
    ) -> Day:
        """Append a new line for the entry and remember the entry in the library."""
        entry = FoodDefinition.create(
            entry.name, entry.calories, entry.protein, entry.carbs, entry.fat
        )
        planned = round_servings(to_non_negative(planned_servings, default=1.0))
        item = FoodInstance.from_definition(self.id_generator(), entry, planned)
        updated = self._save(replace(day, items=[*day.items, item]))
        self.library_service.add_if_new(entry)
        return updated

    def remove_item(self, day: Day, item_id: str) -> Day:
        """Remove the line with the given id."""
        if day.find_item(item_id) is None:
            return day
        return self._save(
            replace(day, items=[item for item in day.items if item.id != item_id])
        )

    def set_planned(self, day: Day, item_id: str, value: object) -> Day:
        """Set planned servings, lowering consumption when it would exceed them."""
        return self._update(day, item_id, lambda item: _with_planned(item, value))

    def adjust_planned(self, day: Day, item_id: str, delta: object) -> Day:
        """Step planned servings up or down, never below zero."""
        return self._update(
            day,
            item_id,
            lambda item: _with_planned(item, item.planned_servings + to_float(delta)),
        )

    def set_consumed(self, day: Day, item_id: str, value: object) -> Day:
        """Set consumed servings, bounded by zero and the planned servings."""
        return self._update(day, item_id, lambda item: _with_consumed(item, value))

    def mark_consumed_ratio(self, day: Day, item_id: str, ratio: object) -> Day:
        """Mark a fraction of the planned servings as eaten."""
        return self._update(
            day,
            item_id,
            lambda item: _with_consumed(
                item, item.planned_servings * to_non_negative(ratio)
            ),
        )

    def toggle_eaten(self, day: Day, item_id: str, eaten: bool) -> Day:
        """Mark a line as fully eaten or not eaten at all."""
        return self._update(
            day,
            item_id,
            lambda item: replace(
                item, consumed_servings=item.planned_servings if eaten else 0.0
            ),
        )

    def _update(
        self,
        day: Day,
        item_id: str,
        change: Callable[[FoodInstance], FoodInstance],
    ) -> Day:
        if day.find_item(item_id) is None:
            return day
        items = [change(item) if item.id == item_id else item for item in day.items]
        return self._save(replace(day, items=items))

    def _save(self, day: Day) -> Day:
        self.repository.save_day(day)
        return day

    def _build_from_library(
        self, day: date, library: Sequence[FoodDefinition] | None
    ) -> Day:
        foods = self.library_service.load_library() if library is None else library
        logger.info(
            "Creating %s from library with %d items", day.isoformat(), len(foods)
        )
        return Day(
            date=day,
            items=[FoodInstance.from_definition(self.id_generator(), f) for f in foods],
        )


def _with_planned(item: FoodInstance, value: object) -> FoodInstance:
    planned = round_servings(to_non_negative(value))
    return replace(
        item,
        planned_servings=planned,
        consumed_servings=min(item.consumed_servings, planned),
    )


def _with_consumed(item: FoodInstance, value: object) -> FoodInstance:
    consumed = clamp(round_servings(to_float(value)), 0.0, item.planned_servings)
    return replace(item, consumed_servings=consumed)
