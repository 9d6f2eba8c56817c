"""ASGI entrypoint for the daily tracker API."""

from daily_tracker.api.app import create_app
from daily_tracker.containers import build_container

app = create_app(build_container())
