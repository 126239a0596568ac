"""File-backed string key-value storage."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Protocol

from .errors import DataLoadError
from .json_loader import parse_json, write_json_atomic

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal string key-value interface used for progress persistence."""

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class LocalStore:
    """Stores string values under string keys in a single JSON object file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None when absent."""
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        if not isinstance(value, str):
            raise TypeError("LocalStore values must be strings.")
        items = self._read_for_update()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        """Delete key if present."""
        items = self._read_for_update()
        if key not in items:
            return
        del items[key]
        self._write(items)

    def _read(self) -> Dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as exc:
            raise DataLoadError(f"Unable to decode {self._path}") from exc
        raw = parse_json(text, self._path)
        if not isinstance(raw, dict):
            raise DataLoadError(f"Expected top-level object in {self._path}")
        return {key: value for key, value in raw.items() if isinstance(value, str)}

    def _read_for_update(self) -> Dict[str, str]:
        try:
            return self._read()
        except DataLoadError as exc:
            logger.warning("Discarding unreadable storage file: %s", exc)
            return {}

    def _write(self, items: Dict[str, str]) -> None:
        write_json_atomic(self._path, items)
