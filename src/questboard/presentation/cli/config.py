"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

from questboard.core.types import DayBoundary

_DEFAULT_DAY_BOUNDARY: DayBoundary = "utc"


def debug_enabled() -> bool:
    """Return True only when QUESTBOARD_DEBUG is explicitly set to '1'."""
    return os.getenv("QUESTBOARD_DEBUG") == "1"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    override = os.environ.get("QUESTBOARD_HOME")
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Questboard"
        return Path.home() / "Questboard"
    return Path.home() / ".config" / "questboard"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_storage_path() -> Path:
    """Return the per-user key-value storage file."""
    return get_user_data_dir() / "storage.json"


def _normalize_day_boundary(value: object) -> DayBoundary:
    return "local" if value == "local" else _DEFAULT_DAY_BOUNDARY


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {"day_boundary": _DEFAULT_DAY_BOUNDARY}
    if not isinstance(raw, dict):
        return {"day_boundary": _DEFAULT_DAY_BOUNDARY}
    return {"day_boundary": _normalize_day_boundary(raw.get("day_boundary"))}


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"day_boundary": _normalize_day_boundary(config.get("day_boundary"))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
