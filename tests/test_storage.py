"""Tests for storage helpers."""

from daily_tracker.services.storage import InMemoryKeyValueStore, load_or_seed


def test_in_memory_stores_do_not_share_values() -> None:
    first = InMemoryKeyValueStore()
    second = InMemoryKeyValueStore()

    first.set("dt_v1:theme", '"light"')

    assert first.get("dt_v1:theme") == '"light"'
    assert first.has("dt_v1:theme")
    assert second.get("dt_v1:theme") is None
    assert not second.has("dt_v1:theme")


def test_load_or_seed_persists_seed_once() -> None:
    saved: list[list[str]] = []

    def load() -> list[str] | None:
        return saved[-1] if saved else None

    first = load_or_seed(load, saved.append, lambda: ["seed"])
    second = load_or_seed(load, saved.append, lambda: ["other"])

    assert first == second == ["seed"]
    assert saved == [["seed"]]
