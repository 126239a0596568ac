"""Pure progress logic: catalog merge, derived metrics and task toggles."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Sequence, Tuple

from questboard.domain.defs import QuestDef
from questboard.domain.quest_state import (
    ProgressSnapshot,
    Quest,
    QuestSnapshot,
    Task,
    TaskSnapshot,
)
from questboard.domain.streak import StreakState

XP_PER_LEVEL = 500


@dataclass(frozen=True, slots=True)
class ProgressMetrics:
    total_xp: int
    max_xp: int
    level: int
    completed_count: int
    quest_count: int
    overall_percent: float


def build_quests(
    catalog: Iterable[QuestDef], snapshot: ProgressSnapshot | None = None
) -> Tuple[Quest, ...]:
    """Merge catalog definitions with persisted completion flags.

    The catalog supplies order and every descriptive field; the snapshot only
    supplies ``done`` flags, matched by id. Catalog tasks missing from the
    snapshot start undone and snapshot entries unknown to the catalog are
    dropped. A snapshot quest flagged completed without any task entries
    counts as every task done. ``completed`` is always derived from the tasks.
    """
    saved: Dict[str, QuestSnapshot] = {}
    if snapshot is not None:
        saved = {entry.id: entry for entry in snapshot.quests}
    quests = []
    for quest_def in catalog:
        entry = saved.get(quest_def.id)
        done_by_id: Dict[str, bool] = {}
        default_done = False
        if entry is not None:
            done_by_id = {task.id: task.done for task in entry.tasks}
            default_done = entry.completed and not entry.tasks
        tasks = tuple(
            Task(id=task.id, text=task.text, done=done_by_id.get(task.id, default_done))
            for task in quest_def.tasks
        )
        quests.append(
            Quest(
                id=quest_def.id,
                title=quest_def.title,
                description=quest_def.description,
                xp=quest_def.xp,
                estimated_minutes=quest_def.estimated_minutes,
                week=quest_def.week,
                tasks=tasks,
                resources=quest_def.resources,
                completed=_all_done(tasks),
            )
        )
    return tuple(quests)


def toggle_task(quests: Tuple[Quest, ...], quest_id: str, task_id: str) -> Tuple[Quest, ...]:
    """Flip one task and re-derive its quest's completion.

    Returns ``quests`` itself when either id is unknown.
    """
    for index, quest in enumerate(quests):
        if quest.id != quest_id:
            continue
        if not any(task.id == task_id for task in quest.tasks):
            return quests
        tasks = tuple(
            replace(task, done=not task.done) if task.id == task_id else task for task in quest.tasks
        )
        updated = replace(quest, tasks=tasks, completed=_all_done(tasks))
        return quests[:index] + (updated,) + quests[index + 1 :]
    return quests


def compute_metrics(quests: Sequence[Quest]) -> ProgressMetrics:
    total_xp = sum(quest.xp for quest in quests if quest.completed)
    max_xp = sum(quest.xp for quest in quests)
    overall = total_xp / max_xp * 100 if max_xp else 0.0
    return ProgressMetrics(
        total_xp=total_xp,
        max_xp=max_xp,
        level=total_xp // XP_PER_LEVEL + 1,
        completed_count=sum(1 for quest in quests if quest.completed),
        quest_count=len(quests),
        overall_percent=overall,
    )


def next_quest(quests: Sequence[Quest]) -> Quest | None:
    """Return the first incomplete quest in catalog order."""
    return next((quest for quest in quests if not quest.completed), None)


def next_task(quest: Quest) -> Task | None:
    return next((task for task in quest.tasks if not task.done), None)


def completed_task_count(quest: Quest) -> int:
    return sum(1 for task in quest.tasks if task.done)


def task_progress_percent(quest: Quest) -> float:
    if not quest.tasks:
        return 0.0
    return completed_task_count(quest) / len(quest.tasks) * 100


def to_snapshot(quests: Sequence[Quest], streak: StreakState) -> ProgressSnapshot:
    """Project quests and streak down to the persisted form."""
    return ProgressSnapshot(
        quests=tuple(
            QuestSnapshot(
                id=quest.id,
                completed=quest.completed,
                tasks=tuple(TaskSnapshot(id=task.id, done=task.done) for task in quest.tasks),
            )
            for quest in quests
        ),
        streak=streak.streak,
        last_activity_date=streak.last_activity_date,
    )


def _all_done(tasks: Sequence[Task]) -> bool:
    return all(task.done for task in tasks)
