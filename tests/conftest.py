"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from daily_tracker.config import Settings
from daily_tracker.containers import AppContainer, build_container
from daily_tracker.domain.days import Day
from daily_tracker.domain.foods import FoodDefinition
from daily_tracker.domain.targets import Targets
from daily_tracker.domain.templates import TemplateEntry
from daily_tracker.services.days import DayLedgerService, DayRepository
from daily_tracker.services.library import LibraryRepository, LibraryService
from daily_tracker.services.preferences import PreferencesRepository
from daily_tracker.services.storage import InMemoryKeyValueStore
from daily_tracker.services.templates import TemplateRepository

TURKEY = FoodDefinition("Smoked Turkey (100 g)", 100, 16, 1, 3)
OAT_LOAF = FoodDefinition("Oat Loaf", 140, 5, 25, 2)
TUNA = FoodDefinition("Tuna Can", 145, 24, 0, 1)

TEST_DAY = date(2024, 5, 1)


@dataclass
class SequentialIds:
    """Deterministic id generator for food lines."""

    prefix: str = "item"
    issued: int = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"{self.prefix}-{self.issued}"


@dataclass
class InMemoryLibraryRepository(LibraryRepository):
    """In-memory library repository for tests."""

    foods: list[FoodDefinition] | None = None
    saves: int = 0

    def get_library(self) -> list[FoodDefinition] | None:
        return None if self.foods is None else list(self.foods)

    def save_library(self, foods: list[FoodDefinition]) -> None:
        self.foods = list(foods)
        self.saves += 1


@dataclass
class InMemoryDayRepository(DayRepository):
    """In-memory day repository for tests."""

    days: dict[date, Day] = field(default_factory=dict)
    saves: int = 0

    def get_day(self, day: date) -> Day | None:
        return self.days.get(day)

    def save_day(self, day: Day) -> None:
        self.days[day.date] = day
        self.saves += 1


@dataclass
class InMemoryTemplateRepository(TemplateRepository):
    """In-memory template repository for tests."""

    entries: list[TemplateEntry] | None = None

    def get_template(self) -> list[TemplateEntry] | None:
        return self.entries

    def save_template(self, entries: list[TemplateEntry]) -> None:
        self.entries = list(entries)


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory preferences repository for tests."""

    targets: Targets | None = None
    theme: str | None = None

    def get_targets(self) -> Targets | None:
        return self.targets

    def set_targets(self, targets: Targets) -> None:
        self.targets = targets

    def get_theme(self) -> str | None:
        return self.theme

    def set_theme(self, theme: str) -> None:
        self.theme = theme


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", timezone="UTC")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    resolved = build_container(settings, store=InMemoryKeyValueStore())
    resolved.day_ledger_service.id_generator = SequentialIds()
    return resolved


@pytest.fixture
def library_repository() -> InMemoryLibraryRepository:
    return InMemoryLibraryRepository()


@pytest.fixture
def library_service(library_repository: InMemoryLibraryRepository) -> LibraryService:
    return LibraryService(library_repository, seed=(TURKEY, OAT_LOAF))


@pytest.fixture
def day_repository() -> InMemoryDayRepository:
    return InMemoryDayRepository()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def ledger(
    day_repository: InMemoryDayRepository,
    library_service: LibraryService,
    ids: SequentialIds,
) -> DayLedgerService:
    return DayLedgerService(
        repository=day_repository,
        library_service=library_service,
        id_generator=ids,
    )
