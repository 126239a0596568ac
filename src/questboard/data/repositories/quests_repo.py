"""Repository for quest definitions."""
from __future__ import annotations

from typing import Dict, List

from questboard.core.types import ResourceType
from questboard.data.errors import DataValidationError
from questboard.data.repositories.base import RepositoryBase
from questboard.domain.defs import QuestDef, ResourceDef, TaskDef

_RESOURCE_TYPES = {member.value: member for member in ResourceType}


class QuestsRepository(RepositoryBase[QuestDef]):
    """Loads and validates the ordered quest catalog."""

    def __init__(self, base_path=None) -> None:
        super().__init__("quests.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, QuestDef]:
        raw_quests = self._require_list(raw.get("quests"), "quests.json.quests")
        definitions: Dict[str, QuestDef] = {}
        for index, quest_payload in enumerate(raw_quests):
            ctx = f"quests[{index}]"
            quest_map = self._require_mapping(quest_payload, ctx)
            quest_id = self._require_str(quest_map.get("id"), f"{ctx}.id")
            if quest_id in definitions:
                raise DataValidationError(f"Duplicate quest id '{quest_id}'.")
            ctx = f"quest '{quest_id}'"
            definitions[quest_id] = QuestDef(
                id=quest_id,
                title=self._require_str(quest_map.get("title"), f"{ctx} title"),
                description=self._require_str(quest_map.get("description"), f"{ctx} description"),
                xp=self._require_positive_int(quest_map.get("xp"), f"{ctx} xp"),
                estimated_minutes=self._require_positive_int(
                    quest_map.get("estimated_minutes"), f"{ctx} estimated_minutes"
                ),
                week=self._require_positive_int(quest_map.get("week"), f"{ctx} week"),
                tasks=tuple(self._parse_tasks(quest_map.get("tasks"), quest_id)),
                resources=tuple(self._parse_resources(quest_map.get("resources", []), quest_id)),
            )
        return definitions

    def _parse_tasks(self, value: object, quest_id: str) -> List[TaskDef]:
        tasks_data = self._require_list(value, f"quest '{quest_id}' tasks")
        if not tasks_data:
            raise DataValidationError(f"quest '{quest_id}' must define at least one task.")
        tasks: List[TaskDef] = []
        seen: set[str] = set()
        for index, entry in enumerate(tasks_data):
            ctx = f"quest '{quest_id}' tasks[{index}]"
            mapping = self._require_mapping(entry, ctx)
            task_id = self._require_str(mapping.get("id"), f"{ctx}.id")
            if task_id in seen:
                raise DataValidationError(f"quest '{quest_id}' has duplicate task id '{task_id}'.")
            seen.add(task_id)
            text = self._require_str(mapping.get("text"), f"{ctx}.text")
            tasks.append(TaskDef(id=task_id, text=text))
        return tasks

    def _parse_resources(self, value: object, quest_id: str) -> List[ResourceDef]:
        resources: List[ResourceDef] = []
        for index, entry in enumerate(self._require_list(value, f"quest '{quest_id}' resources")):
            ctx = f"quest '{quest_id}' resources[{index}]"
            mapping = self._require_mapping(entry, ctx)
            type_name = self._require_str(mapping.get("type"), f"{ctx}.type")
            resource_type = _RESOURCE_TYPES.get(type_name)
            if resource_type is None:
                raise DataValidationError(
                    f"{ctx}.type must be one of {', '.join(_RESOURCE_TYPES)}."
                )
            duration = mapping.get("duration")
            if duration is not None:
                duration = self._require_str(duration, f"{ctx}.duration")
            resources.append(
                ResourceDef(
                    title=self._require_str(mapping.get("title"), f"{ctx}.title"),
                    url=self._require_str(mapping.get("url"), f"{ctx}.url"),
                    type=resource_type,
                    duration=duration,
                )
            )
        return resources
