"""Supabase implementation of the key-value store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from daily_tracker.services.storage import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Supabase-backed store keeping one row per key."""

    client: Client
    table_name: str = "kv_store"

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Insert or replace the row for a key."""
        self.client.table(self.table_name).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()

    def has(self, key: str) -> bool:
        response = (
            self.client.table(self.table_name)
            .select("key")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        return bool(response.data)
