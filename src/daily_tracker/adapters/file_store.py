"""Filesystem implementation of the key-value store."""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from daily_tracker.services.storage import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class FileKeyValueStore(KeyValueStore):
    """Stores each key as one UTF-8 file inside a directory."""

    directory: Path

    @classmethod
    def create(cls, directory: str | Path) -> "FileKeyValueStore":
        """Create the store, making the directory if needed."""
        path = Path(directory).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return cls(directory=path)

    def get(self, key: str) -> str | None:
        """Return the file contents for a key, or None when unreadable."""
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError):
            logger.warning("Failed to read stored key %s", key, exc_info=True)
            return None

    def set(self, key: str, value: str) -> None:
        """Replace the value atomically through a temporary file."""
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def has(self, key: str) -> bool:
        return self._path(key).is_file()

    def _path(self, key: str) -> Path:
        return self.directory / f"{quote(key, safe='')}.json"
