"""Tests for key-value record storage and repositories."""

import json
from datetime import date

from daily_tracker.adapters.kv_day_repository import KeyValueDayRepository
from daily_tracker.adapters.kv_library_repository import KeyValueLibraryRepository
from daily_tracker.adapters.kv_preferences_repository import (
    KeyValuePreferencesRepository,
)
from daily_tracker.adapters.kv_records import KeyValueRecords, day_key
from daily_tracker.adapters.kv_template_repository import KeyValueTemplateRepository
from daily_tracker.domain.days import Day
from daily_tracker.domain.foods import FoodInstance
from daily_tracker.domain.targets import Targets
from daily_tracker.domain.templates import TemplateEntry
from daily_tracker.services.days import DayLedgerService
from daily_tracker.services.library import LibraryService
from daily_tracker.services.storage import InMemoryKeyValueStore
from tests.conftest import OAT_LOAF, TEST_DAY, TURKEY, SequentialIds


def _records() -> KeyValueRecords:
    return KeyValueRecords(InMemoryKeyValueStore(), namespace="dt_v1")


def test_day_key_uses_iso_date() -> None:
    assert day_key(date(2024, 1, 9)) == "day:2024-01-09"


def test_records_are_namespaced() -> None:
    records = _records()

    records.set("theme", "light")

    assert records.store.get("dt_v1:theme") == '"light"'
    assert records.store.has("dt_v1:theme")
    assert not records.store.has("dt_v1:template")
    assert records.get("template") is None


def test_unparsable_value_is_absent() -> None:
    records = _records()
    records.store.set("dt_v1:library", "{not json")

    assert records.get("library") is None
    assert KeyValueLibraryRepository(records).get_library() is None


def test_deeply_nested_value_is_absent() -> None:
    records = _records()
    records.store.set("dt_v1:library", "[" * 100_000 + "]" * 100_000)
    service = LibraryService(KeyValueLibraryRepository(records), seed=(TURKEY,))

    assert records.get("library") is None
    assert service.load_library() == [TURKEY]


def test_huge_stored_number_is_coerced() -> None:
    records = _records()
    records.store.set(
        "dt_v1:library", '[{"name": "Tea", "calories": 1' + "0" * 400 + "}]"
    )

    library = LibraryService(KeyValueLibraryRepository(records)).load_library()

    assert [(food.name, food.calories) for food in library] == [("Tea", 0)]


def test_corrupted_library_falls_back_to_seed() -> None:
    records = _records()
    records.store.set("dt_v1:library", json.dumps({"name": "not a list"}))
    service = LibraryService(KeyValueLibraryRepository(records), seed=(TURKEY,))

    assert service.load_library() == [TURKEY]
    assert json.loads(records.store.get("dt_v1:library"))[0]["name"] == TURKEY.name


def test_library_round_trip_coerces_bad_numbers() -> None:
    records = _records()
    records.store.set(
        "dt_v1:library",
        json.dumps([{"name": " Tea ", "calories": "2", "protein": -1, "fat": "x"}]),
    )

    library = KeyValueLibraryRepository(records).get_library()

    assert library is not None
    assert library[0].name == "Tea"
    assert library[0].calories == 2
    assert library[0].protein == 0
    assert library[0].carbs == 0
    assert library[0].fat == 0


def test_day_round_trip_uses_stored_field_names() -> None:
    records = _records()
    repository = KeyValueDayRepository(records)
    day = Day(
        date=TEST_DAY,
        items=[
            FoodInstance(
                id="abc",
                name="Oat Loaf",
                calories=140,
                protein=5,
                carbs=25,
                fat=2,
                planned_servings=1.5,
                consumed_servings=0.5,
            )
        ],
    )

    repository.save_day(day)

    stored = json.loads(records.store.get("dt_v1:day:2024-05-01"))
    assert stored["date"] == "2024-05-01"
    assert stored["items"][0]["plannedServings"] == 1.5
    assert stored["items"][0]["consumedServings"] == 0.5
    assert repository.get_day(TEST_DAY) == day


def test_stored_day_restores_consumption_invariant() -> None:
    records = _records()
    records.set(
        "day:2024-05-01",
        {
            "date": "2024-05-01",
            "items": [
                {
                    "id": "x",
                    "name": "Tuna Can",
                    "calories": 145,
                    "protein": 24,
                    "carbs": 0,
                    "fat": 1,
                    "plannedServings": 1,
                    "consumedServings": 4,
                }
            ],
        },
    )

    day = KeyValueDayRepository(records).get_day(TEST_DAY)

    assert day is not None
    assert day.items[0].consumed_servings == 1


def test_malformed_day_is_recreated() -> None:
    records = _records()
    records.set(
        "day:2024-05-01", {"date": "2024-05-01", "items": [{"name": "no id"}]}
    )
    library_service = LibraryService(
        KeyValueLibraryRepository(records), seed=(TURKEY, OAT_LOAF)
    )
    ledger = DayLedgerService(
        repository=KeyValueDayRepository(records),
        library_service=library_service,
        id_generator=SequentialIds(),
    )

    day = ledger.load_or_create(TEST_DAY)

    assert [item.id for item in day.items] == ["item-1", "item-2"]
    assert ledger.load_or_create(TEST_DAY) == day


def test_template_and_preferences_round_trip() -> None:
    records = _records()
    templates = KeyValueTemplateRepository(records)
    preferences = KeyValuePreferencesRepository(records)
    entries = [TemplateEntry("Tuna Can", 145, 24, 0, 1, planned_servings=2)]

    assert templates.get_template() is None
    templates.save_template(entries)
    preferences.set_targets(Targets(calories=1800, protein=150, carbs=150, fat=50))
    preferences.set_theme("light")

    assert templates.get_template() == entries
    assert preferences.get_targets() == Targets(1800, 150, 150, 50)
    assert preferences.get_theme() == "light"


def test_non_string_theme_is_absent() -> None:
    records = _records()
    records.set("theme", 42)

    assert KeyValuePreferencesRepository(records).get_theme() is None
