"""Template service for reusing a day's composition."""

from dataclasses import dataclass
from typing import Protocol

from daily_tracker.domain.days import Day
from daily_tracker.domain.templates import TemplateEntry


class TemplateRepository(Protocol):
    """Persistence interface for the current template."""

    def get_template(self) -> list[TemplateEntry] | None:
        """Return the saved template, if any."""

    def save_template(self, entries: list[TemplateEntry]) -> None:
        """Replace the saved template."""


@dataclass
class TemplateService:
    """Service for saving and loading the current template."""

    repository: TemplateRepository

    def save_template(self, day: Day) -> list[TemplateEntry]:
        """Snapshot the day's foods and planned servings, overwriting the old one."""
        entries = [
            TemplateEntry(
                name=item.name,
                calories=item.calories,
                protein=item.protein,
                carbs=item.carbs,
                fat=item.fat,
                planned_servings=item.planned_servings,
            )
            for item in day.items
        ]
        self.repository.save_template(entries)
        return entries

    def load_template(self) -> list[TemplateEntry] | None:
        """Return the current template, or None when none was saved."""
        return self.repository.get_template()
