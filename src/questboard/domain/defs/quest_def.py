"""Quest definition data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from questboard.core.types import ResourceType


@dataclass(frozen=True, slots=True)
class TaskDef:
    id: str
    text: str


@dataclass(frozen=True, slots=True)
class ResourceDef:
    """Reference material linked from a quest; never persisted."""

    title: str
    url: str
    type: ResourceType
    duration: str | None = None


@dataclass(frozen=True, slots=True)
class QuestDef:
    id: str
    title: str
    description: str
    xp: int
    estimated_minutes: int
    week: int
    tasks: Tuple[TaskDef, ...]
    resources: Tuple[ResourceDef, ...] = ()
