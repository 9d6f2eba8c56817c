"""User preference service for targets and theme."""

from dataclasses import dataclass
from typing import Protocol

from daily_tracker.domain.targets import DEFAULT_TARGETS, Targets
from daily_tracker.services.storage import load_or_seed

DEFAULT_THEME = "dark"


class PreferencesRepository(Protocol):
    """Persistence interface for user preferences."""

    def get_targets(self) -> Targets | None:
        """Return stored targets if set."""

    def set_targets(self, targets: Targets) -> None:
        """Replace the stored targets."""

    def get_theme(self) -> str | None:
        """Return the stored theme if set."""

    def set_theme(self, theme: str) -> None:
        """Replace the stored theme."""


@dataclass
class PreferencesService:
    """Service for daily targets and the presentation theme."""

    repository: PreferencesRepository

    def get_targets(self) -> Targets:
        """Return stored targets, persisting the defaults on first run."""
        return load_or_seed(
            self.repository.get_targets,
            self.repository.set_targets,
            lambda: DEFAULT_TARGETS,
        )

    def save_targets(self, targets: Targets) -> Targets:
        """Persist targets after coercing invalid values to zero."""
        cleaned = Targets.create(
            calories=targets.calories,
            protein=targets.protein,
            carbs=targets.carbs,
            fat=targets.fat,
        )
        self.repository.set_targets(cleaned)
        return cleaned

    def get_theme(self) -> str:
        """Return the theme or the dark default if unset."""
        return self.repository.get_theme() or DEFAULT_THEME

    def set_theme(self, theme: str) -> str:
        self.repository.set_theme(theme)
        return theme
