"""Session context tying the selected date to its day and preferences."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from daily_tracker.services.metrics import build_report

if TYPE_CHECKING:
    from daily_tracker.containers import AppContainer
    from daily_tracker.domain.days import Day
    from daily_tracker.domain.foods import FoodDefinition
    from daily_tracker.domain.metrics import DailyReport
    from daily_tracker.domain.targets import Targets
    from daily_tracker.domain.templates import TemplateEntry
    from daily_tracker.services.days import DayLedgerService
    from daily_tracker.services.library import LibraryService
    from daily_tracker.services.preferences import PreferencesService
    from daily_tracker.services.templates import TemplateService


def today_in(timezone_name: str) -> date:
    """Return the current calendar date in a timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


@dataclass
class TrackerSession:
    """State of one user session: the selected day and the current targets."""

    ledger: DayLedgerService
    library_service: LibraryService
    template_service: TemplateService
    preferences_service: PreferencesService
    day: Day
    targets: Targets
    timezone: str = "UTC"
    serving_step: float = 0.5

    @property
    def selected_date(self) -> date:
        return self.day.date

    def select_date(self, day: date) -> Day:
        """Switch to another date, creating its day on first access."""
        self.day = self.ledger.load_or_create(day)
        return self.day

    def go_to_today(self) -> Day:
        return self.select_date(today_in(self.timezone))

    def library(self) -> list[FoodDefinition]:
        return self.library_service.load_library()

    def add_item(self, entry: FoodDefinition, planned_servings: object = 1.0) -> Day:
        self.day = self.ledger.add_item(self.day, entry, planned_servings)
        return self.day

    def remove_item(self, item_id: str) -> Day:
        self.day = self.ledger.remove_item(self.day, item_id)
        return self.day

    def set_planned(self, item_id: str, value: object) -> Day:
        self.day = self.ledger.set_planned(self.day, item_id, value)
        return self.day

    def step_up(self, item_id: str) -> Day:
        """Increase planned servings by one fixed step."""
        self.day = self.ledger.adjust_planned(self.day, item_id, self.serving_step)
        return self.day

    def step_down(self, item_id: str) -> Day:
        """Decrease planned servings by one fixed step."""
        self.day = self.ledger.adjust_planned(self.day, item_id, -self.serving_step)
        return self.day

    def set_consumed(self, item_id: str, value: object) -> Day:
        self.day = self.ledger.set_consumed(self.day, item_id, value)
        return self.day

    def mark_consumed_ratio(self, item_id: str, ratio: object) -> Day:
        self.day = self.ledger.mark_consumed_ratio(self.day, item_id, ratio)
        return self.day

    def toggle_eaten(self, item_id: str, eaten: bool) -> Day:
        self.day = self.ledger.toggle_eaten(self.day, item_id, eaten)
        return self.day

    def reset_day(self) -> Day:
        """Replace the selected day's plan with the full library."""
        self.day = self.ledger.reset_to_library(self.day.date)
        return self.day

    def save_template(self) -> list[TemplateEntry]:
        return self.template_service.save_template(self.day)

    def apply_template(self) -> Day | None:
        """Replace the selected day's plan with the saved template.

        Returns None, leaving the day untouched, when no template was saved.
        """
        template = self.template_service.load_template()
        if template is None:
            return None
        self.day = self.ledger.create_from_template(self.day.date, template)
        return self.day

    def update_targets(self, targets: Targets) -> Targets:
        self.targets = self.preferences_service.save_targets(targets)
        return self.targets

    def report(self) -> DailyReport:
        """Return totals and progress for the selected day."""
        return build_report(self.day, self.targets)


def open_session(container: AppContainer, on: date | None = None) -> TrackerSession:
    """Open a session on a date, defaulting to today in the configured timezone."""
    settings = container.settings
    selected = on or today_in(settings.timezone)
    return TrackerSession(
        ledger=container.day_ledger_service,
        library_service=container.library_service,
        template_service=container.template_service,
        preferences_service=container.preferences_service,
        day=container.day_ledger_service.load_or_create(selected),
        targets=container.preferences_service.get_targets(),
        timezone=settings.timezone,
        serving_step=settings.serving_step,
    )
