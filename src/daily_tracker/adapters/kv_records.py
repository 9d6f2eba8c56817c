"""JSON records stored under namespaced keys, plus their row parsers."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import TypeVar

from daily_tracker.domain.days import Day
from daily_tracker.domain.foods import FoodDefinition, FoodInstance
from daily_tracker.domain.numbers import to_non_negative
from daily_tracker.domain.targets import Targets
from daily_tracker.domain.templates import TemplateEntry
from daily_tracker.services.storage import KeyValueStore

T = TypeVar("T")

logger = logging.getLogger(__name__)

LIBRARY_KEY = "library"
DEFAULTS_KEY = "defaults"
TEMPLATE_KEY = "template"
THEME_KEY = "theme"


def day_key(day: date) -> str:
    """Return the logical key for a calendar date."""
    return f"day:{day.isoformat()}"


class MalformedRecordError(ValueError):
    """Raised by parsers when a stored value has the wrong shape."""


@dataclass
class KeyValueRecords:
    """Reads and writes JSON values under a versioned key namespace."""

    store: KeyValueStore
    namespace: str = "dt_v1"

    def key(self, name: str) -> str:
        return f"{self.namespace}:{name}"

    def get(self, name: str) -> object | None:
        """Return the decoded value, or None when unset or unreadable."""
        key = self.key(name)
        raw = self.store.get(key)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Ignoring unparsable stored value for %s", key)
            return None

    def set(self, name: str, value: object) -> None:
        self.store.set(self.key(name), json.dumps(value))

    def load(self, name: str, parser: Callable[[object], T]) -> T | None:
        """Return the parsed value, treating malformed content as absent."""
        raw = self.get(name)
        if raw is None:
            return None
        try:
            return parser(raw)
        except MalformedRecordError as exc:
            logger.warning("Ignoring malformed stored value for %s: %s", name, exc)
            return None


def parse_definition(row: object) -> FoodDefinition:
    """Parse a stored library row into a domain model."""
    data = _require_dict(row)
    return FoodDefinition.create(
        name=data.get("name"),
        calories=data.get("calories"),
        protein=data.get("protein"),
        carbs=data.get("carbs"),
        fat=data.get("fat"),
    )


def dump_definition(entry: FoodDefinition) -> dict[str, object]:
    return {
        "name": entry.name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
    }


def parse_library(raw: object) -> list[FoodDefinition]:
    return [parse_definition(row) for row in _require_list(raw)]


def parse_instance(row: object) -> FoodInstance:
    """Parse a stored day line, restoring the consumption invariant."""
    data = _require_dict(row)
    item_id = data.get("id")
    if not isinstance(item_id, str) or not item_id:
        raise MalformedRecordError("food line without id")
    entry = parse_definition(data)
    planned = to_non_negative(data.get("plannedServings"), default=1.0)
    consumed = min(to_non_negative(data.get("consumedServings")), planned)
    return FoodInstance(
        id=item_id,
        name=entry.name,
        calories=entry.calories,
        protein=entry.protein,
        carbs=entry.carbs,
        fat=entry.fat,
        planned_servings=planned,
        consumed_servings=consumed,
    )


def dump_instance(item: FoodInstance) -> dict[str, object]:
    return {
        "id": item.id,
        "name": item.name,
        "calories": item.calories,
        "protein": item.protein,
        "carbs": item.carbs,
        "fat": item.fat,
        "plannedServings": item.planned_servings,
        "consumedServings": item.consumed_servings,
    }


def parse_day(raw: object) -> Day:
    data = _require_dict(raw)
    try:
        day = date.fromisoformat(str(data.get("date")))
    except ValueError as exc:
        raise MalformedRecordError("day without a valid date") from exc
    items = [parse_instance(row) for row in _require_list(data.get("items"))]
    return Day(date=day, items=items)


def dump_day(day: Day) -> dict[str, object]:
    return {
        "date": day.key,
        "items": [dump_instance(item) for item in day.items],
    }


def parse_template(raw: object) -> list[TemplateEntry]:
    entries: list[TemplateEntry] = []
    for row in _require_list(raw):
        data = _require_dict(row)
        entry = parse_definition(data)
        entries.append(
            TemplateEntry(
                name=entry.name,
                calories=entry.calories,
                protein=entry.protein,
                carbs=entry.carbs,
                fat=entry.fat,
                planned_servings=to_non_negative(
                    data.get("plannedServings"), default=1.0
                ),
            )
        )
    return entries


def dump_template(entries: list[TemplateEntry]) -> list[dict[str, object]]:
    return [
        {
            "name": entry.name,
            "calories": entry.calories,
            "protein": entry.protein,
            "carbs": entry.carbs,
            "fat": entry.fat,
            "plannedServings": entry.planned_servings,
        }
        for entry in entries
    ]


def parse_targets(raw: object) -> Targets:
    data = _require_dict(raw)
    return Targets.create(
        calories=data.get("calories"),
        protein=data.get("protein"),
        carbs=data.get("carbs"),
        fat=data.get("fat"),
    )


def dump_targets(targets: Targets) -> dict[str, float]:
    return {
        "calories": targets.calories,
        "protein": targets.protein,
        "carbs": targets.carbs,
        "fat": targets.fat,
    }


def parse_theme(raw: object) -> str:
    if not isinstance(raw, str):
        raise MalformedRecordError("theme is not a string")
    return raw


def _require_dict(value: object) -> dict[str, object]:
    if not isinstance(value, dict):
        raise MalformedRecordError(f"expected an object, got {type(value).__name__}")
    return value


def _require_list(value: object) -> list[object]:
    if not isinstance(value, list):
        raise MalformedRecordError(f"expected a list, got {type(value).__name__}")
    return value
