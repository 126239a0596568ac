"""Serialization helpers for persisted progress snapshots."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping

from questboard.domain.quest_state import ProgressSnapshot, QuestSnapshot, TaskSnapshot
from questboard.services.errors import SaveLoadError

SavePayload = Dict[str, Any]


class SaveService:
    """Converts progress snapshots to/from their validated JSON payload."""

    def serialize(self, snapshot: ProgressSnapshot) -> SavePayload:
        """Return the JSON-ready payload for a snapshot."""
        return {
            "quests": [
                {
                    "id": quest.id,
                    "completed": quest.completed,
                    "tasks": [{"id": task.id, "done": task.done} for task in quest.tasks],
                }
                for quest in snapshot.quests
            ],
            "streak": snapshot.streak,
            "lastActivityDate": (
                snapshot.last_activity_date.isoformat() if snapshot.last_activity_date else None
            ),
        }

    def deserialize(self, payload: Any) -> ProgressSnapshot:
        """Rebuild a snapshot from a persisted payload."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Progress data must be a JSON object.")
        quests = self._coerce_quests(payload.get("quests"))
        streak = self._coerce_non_negative_int(payload.get("streak"), "streak", default=0)
        last_activity_date = self._coerce_optional_date(
            payload.get("lastActivityDate"), "lastActivityDate"
        )
        return ProgressSnapshot(
            quests=tuple(quests),
            streak=streak,
            last_activity_date=last_activity_date,
        )

    def _coerce_quests(self, value: Any) -> List[QuestSnapshot]:
        entries = self._require_list(value, "quests")
        quests: List[QuestSnapshot] = []
        for index, entry in enumerate(entries):
            context = f"quests[{index}]"
            mapping = self._require_dict(entry, context)
            quests.append(
                QuestSnapshot(
                    id=self._require_str(mapping.get("id"), f"{context}.id"),
                    completed=self._require_bool(mapping.get("completed"), f"{context}.completed"),
                    tasks=tuple(self._coerce_tasks(mapping.get("tasks"), f"{context}.tasks")),
                )
            )
        return quests

    def _coerce_tasks(self, value: Any, context: str) -> List[TaskSnapshot]:
        if value is None:
            return []
        tasks: List[TaskSnapshot] = []
        for index, entry in enumerate(self._require_list(value, context)):
            entry_context = f"{context}[{index}]"
            mapping = self._require_dict(entry, entry_context)
            tasks.append(
                TaskSnapshot(
                    id=self._require_str(mapping.get("id"), f"{entry_context}.id"),
                    done=self._require_bool(mapping.get("done"), f"{entry_context}.done"),
                )
            )
        return tasks

    @staticmethod
    def _require_dict(value: Any, context: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_list(value: Any, context: str) -> List[Any]:
        if not isinstance(value, list):
            raise SaveLoadError(f"{context} must be a list.")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_bool(value: Any, context: str) -> bool:
        if not isinstance(value, bool):
            raise SaveLoadError(f"{context} must be a boolean.")
        return value

    @staticmethod
    def _coerce_non_negative_int(value: Any, context: str, *, default: int) -> int:
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise SaveLoadError(f"{context} must be a non-negative integer.")
        return value

    @staticmethod
    def _coerce_optional_date(value: Any, context: str) -> date | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be an ISO date string.")
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise SaveLoadError(f"{context} must be an ISO date string: {exc}") from exc
