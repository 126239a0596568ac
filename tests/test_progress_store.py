from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

import pytest

from questboard.data.local_store import LocalStore
from questboard.domain.quest_state import ProgressSnapshot, QuestSnapshot, TaskSnapshot
from questboard.services.progress_store import STORAGE_KEY, ProgressStore


class _FailingBackend:
    """Backend whose reads and writes fail like a full or missing disk."""

    def get_item(self, key: str) -> str | None:
        raise OSError("disk unavailable")

    def set_item(self, key: str, value: str) -> None:
        raise OSError("No space left on device")

    def remove_item(self, key: str) -> None:
        raise OSError("disk unavailable")


def _snapshot() -> ProgressSnapshot:
    return ProgressSnapshot(
        quests=(
            QuestSnapshot(id="week1-day1", completed=False, tasks=(TaskSnapshot(id="t1", done=True),)),
        ),
        streak=4,
        last_activity_date=date(2024, 1, 2),
    )


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    store = ProgressStore(LocalStore(tmp_path / "storage.json"))

    store.save(_snapshot())

    assert store.load() == _snapshot()


def test_save_writes_under_fixed_key(tmp_path: Path) -> None:
    backend = LocalStore(tmp_path / "storage.json")
    ProgressStore(backend).save(_snapshot())

    payload = json.loads(backend.get_item(STORAGE_KEY))
    assert STORAGE_KEY == "unity-quest-progress"
    assert payload["streak"] == 4
    assert payload["lastActivityDate"] == "2024-01-02"
    assert set(payload["quests"][0]) == {"id", "completed", "tasks"}


def test_load_without_saved_progress_returns_none(tmp_path: Path) -> None:
    assert ProgressStore(LocalStore(tmp_path / "storage.json")).load() is None


def test_load_unparseable_value_returns_none(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    backend = LocalStore(tmp_path / "storage.json")
    backend.set_item(STORAGE_KEY, "{not json")

    with caplog.at_level(logging.WARNING):
        assert ProgressStore(backend).load() is None
    assert "unreadable stored progress" in caplog.text


def test_load_deeply_nested_value_returns_none(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    backend = LocalStore(tmp_path / "storage.json")
    backend.set_item(STORAGE_KEY, "[" * 200000)

    with caplog.at_level(logging.WARNING):
        assert ProgressStore(backend).load() is None
    assert "unreadable stored progress" in caplog.text


def test_load_invalid_structure_returns_none(tmp_path: Path) -> None:
    backend = LocalStore(tmp_path / "storage.json")
    backend.set_item(STORAGE_KEY, json.dumps({"quests": "nope"}))

    assert ProgressStore(backend).load() is None


def test_load_corrupt_storage_file_returns_none(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("garbage", encoding="utf-8")

    assert ProgressStore(LocalStore(path)).load() is None


def test_load_undecodable_storage_file_returns_none(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_bytes(b'{"unity-quest-progress": "\xff\xfe"}')

    assert ProgressStore(LocalStore(path)).load() is None


def test_save_over_undecodable_storage_file(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_bytes(b"\xff\xfe garbage")
    store = ProgressStore(LocalStore(path))

    store.save(_snapshot())

    assert store.load() == _snapshot()


def test_backend_failures_are_swallowed(caplog: pytest.LogCaptureFixture) -> None:
    store = ProgressStore(_FailingBackend())

    with caplog.at_level(logging.WARNING):
        assert store.load() is None
        store.save(_snapshot())
    assert "Failed to save progress" in caplog.text


def test_no_backend_is_noop() -> None:
    store = ProgressStore(None)

    store.save(_snapshot())

    assert store.available is False
    assert store.load() is None


def test_custom_key(tmp_path: Path) -> None:
    backend = LocalStore(tmp_path / "storage.json")
    ProgressStore(backend, key="profile-2").save(_snapshot())

    assert backend.get_item(STORAGE_KEY) is None
    assert ProgressStore(backend, key="profile-2").load() == _snapshot()
