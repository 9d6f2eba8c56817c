"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_BACKENDS = {"file", "memory", "supabase"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "file"
    storage_dir: str = ".daily_tracker"
    storage_namespace: str = "dt_v1"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "kv_store"
    timezone: str = "UTC"
    serving_step: float = 0.5
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str | None) -> str:
    """Normalize the configured storage backend name."""
    if raw is None:
        return "file"
    cleaned = raw.strip().lower()
    if not cleaned:
        return "file"
    if cleaned not in STORAGE_BACKENDS:
        allowed = ", ".join(sorted(STORAGE_BACKENDS))
        raise ValueError(f"Unknown storage backend {raw!r}; expected one of {allowed}")
    return cleaned
