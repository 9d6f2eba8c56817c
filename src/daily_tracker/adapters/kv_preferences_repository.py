"""Key-value repository for targets and theme."""

from dataclasses import dataclass

from daily_tracker.adapters.kv_records import (
    DEFAULTS_KEY,
    THEME_KEY,
    KeyValueRecords,
    dump_targets,
    parse_targets,
    parse_theme,
)
from daily_tracker.domain.targets import Targets
from daily_tracker.services.preferences import PreferencesRepository


@dataclass
class KeyValuePreferencesRepository(PreferencesRepository):
    """Key-value implementation for user preferences."""

    records: KeyValueRecords

    def get_targets(self) -> Targets | None:
        """Return the stored targets."""
        return self.records.load(DEFAULTS_KEY, parse_targets)

    def set_targets(self, targets: Targets) -> None:
        self.records.set(DEFAULTS_KEY, dump_targets(targets))

    def get_theme(self) -> str | None:
        """Return the stored theme string."""
        return self.records.load(THEME_KEY, parse_theme)

    def set_theme(self, theme: str) -> None:
        self.records.set(THEME_KEY, theme)
