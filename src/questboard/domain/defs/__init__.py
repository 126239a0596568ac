"""Domain definition exports."""

from .quest_def import QuestDef, ResourceDef, TaskDef

__all__ = [
    "QuestDef",
    "ResourceDef",
    "TaskDef",
]
