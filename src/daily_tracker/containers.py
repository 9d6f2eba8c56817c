"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from daily_tracker.adapters.file_store import FileKeyValueStore
from daily_tracker.adapters.kv_day_repository import KeyValueDayRepository
from daily_tracker.adapters.kv_library_repository import KeyValueLibraryRepository
from daily_tracker.adapters.kv_preferences_repository import (
    KeyValuePreferencesRepository,
)
from daily_tracker.adapters.kv_records import KeyValueRecords
from daily_tracker.adapters.kv_template_repository import KeyValueTemplateRepository
from daily_tracker.adapters.supabase_store import SupabaseKeyValueStore
from daily_tracker.config import Settings, parse_storage_backend
from daily_tracker.services.days import DayLedgerService
from daily_tracker.services.library import LibraryService
from daily_tracker.services.preferences import PreferencesService
from daily_tracker.services.storage import InMemoryKeyValueStore, KeyValueStore
from daily_tracker.services.templates import TemplateService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    library_service: LibraryService
    day_ledger_service: DayLedgerService
    template_service: TemplateService
    preferences_service: PreferencesService


def build_store(settings: Settings) -> KeyValueStore:
    """Create the key-value store selected by the settings."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase storage requires SUPABASE_URL and SUPABASE_SERVICE_KEY"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table_name=settings.supabase_table)
    return FileKeyValueStore.create(settings.storage_dir)


def build_container(
    settings: Settings | None = None, store: KeyValueStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store if store is not None else build_store(resolved_settings)
    records = KeyValueRecords(
        resolved_store, namespace=resolved_settings.storage_namespace
    )
    library_service = LibraryService(KeyValueLibraryRepository(records))
    day_ledger_service = DayLedgerService(
        repository=KeyValueDayRepository(records),
        library_service=library_service,
    )
    template_service = TemplateService(KeyValueTemplateRepository(records))
    preferences_service = PreferencesService(KeyValuePreferencesRepository(records))

    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        library_service=library_service,
        day_ledger_service=day_ledger_service,
        template_service=template_service,
        preferences_service=preferences_service,
    )
