"""Tests for container wiring and settings."""

import pytest

from daily_tracker.adapters.file_store import FileKeyValueStore
from daily_tracker.config import Settings, parse_storage_backend
from daily_tracker.containers import build_container, build_store
from daily_tracker.services.storage import InMemoryKeyValueStore


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.store, InMemoryKeyValueStore)
    assert container.day_ledger_service.library_service is container.library_service
    assert len(container.library_service.load_library()) == 15


def test_build_store_uses_file_backend(tmp_path) -> None:
    settings = Settings(storage_backend="file", storage_dir=str(tmp_path / "store"))

    store = build_store(settings)

    assert isinstance(store, FileKeyValueStore)
    assert (tmp_path / "store").is_dir()


def test_file_backed_container_persists_between_builds(tmp_path) -> None:
    settings = Settings(storage_backend="file", storage_dir=str(tmp_path))
    build_container(settings).preferences_service.set_theme("light")

    assert build_container(settings).preferences_service.get_theme() == "light"


def test_namespace_is_configurable(settings) -> None:
    store = InMemoryKeyValueStore()
    container = build_container(
        settings.model_copy(update={"storage_namespace": "dt_v2"}), store=store
    )

    container.preferences_service.set_theme("light")

    assert store.has("dt_v2:theme")
    assert not store.has("dt_v1:theme")


def test_supabase_backend_requires_credentials() -> None:
    settings = Settings(
        storage_backend="supabase", supabase_url=None, supabase_service_key=None
    )

    with pytest.raises(ValueError, match="SUPABASE_URL"):
        build_store(settings)


def test_parse_storage_backend() -> None:
    assert parse_storage_backend(None) == "file"
    assert parse_storage_backend("  ") == "file"
    assert parse_storage_backend(" Memory ") == "memory"
    with pytest.raises(ValueError, match="Unknown storage backend"):
        parse_storage_backend("redis")
