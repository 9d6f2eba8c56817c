"""Key-value implementation for day ledgers."""

from dataclasses import dataclass
from datetime import date

from daily_tracker.adapters.kv_records import (
    KeyValueRecords,
    day_key,
    dump_day,
    parse_day,
)
from daily_tracker.domain.days import Day
from daily_tracker.services.days import DayRepository


@dataclass
class KeyValueDayRepository(DayRepository):
    """Stores each day under its own dated key."""

    records: KeyValueRecords

    def get_day(self, day: date) -> Day | None:
        """Return the stored day for a date, if present."""
        return self.records.load(day_key(day), parse_day)

    def save_day(self, day: Day) -> None:
        """Replace the stored day for its date."""
        self.records.set(day_key(day.date), dump_day(day))
