"""Quest progress state data structures."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from questboard.domain.defs import ResourceDef


@dataclass(frozen=True, slots=True)
class Task:
    """A checklist item inside a quest."""

    id: str
    text: str
    done: bool = False


@dataclass(frozen=True, slots=True)
class Quest:
    """A catalog quest merged with the user's completion state."""

    id: str
    title: str
    description: str
    xp: int
    estimated_minutes: int
    week: int
    tasks: Tuple[Task, ...]
    resources: Tuple[ResourceDef, ...] = ()
    completed: bool = False


@dataclass(frozen=True, slots=True)
class TaskSnapshot:
    id: str
    done: bool


@dataclass(frozen=True, slots=True)
class QuestSnapshot:
    id: str
    completed: bool
    tasks: Tuple[TaskSnapshot, ...] = ()


@dataclass(frozen=True, slots=True)
class ProgressSnapshot:
    """Persisted projection of progress: completion flags plus streak state."""

    quests: Tuple[QuestSnapshot, ...] = ()
    streak: int = 0
    last_activity_date: date | None = None
