"""Low-level JSON helpers shared by repositories and local storage."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def parse_json(text: str, source: Path | str) -> object:
    """Parse JSON text, naming ``source`` in the DataLoadError on failure."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise DataLoadError(f"Invalid JSON in {source}: {exc}") from exc


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"File not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"Unable to decode file: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read file: {path}") from exc
    return parse_json(text, path)


def write_json_atomic(path: Path, payload: object) -> None:
    """Write payload through a sibling temp file so readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(f"{path.name}.tmp")
    temp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    temp_path.replace(path)
