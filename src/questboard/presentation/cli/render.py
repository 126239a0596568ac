"""Shared CLI rendering helpers.

The ``*_lines`` and ``format_*`` helpers build strings only; the ``render_*``
helpers print them.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence

from questboard.core.types import ResourceType
from questboard.domain import progress
from questboard.domain.defs import ResourceDef
from questboard.domain.quest_state import Quest, Task
from questboard.services.progress_service import ProgressView

RESOURCE_ICONS = {
    ResourceType.VIDEO: "🎬",
    ResourceType.DOCS: "📚",
    ResourceType.INTERACTIVE: "🎮",
    ResourceType.ARTICLE: "📝",
    ResourceType.COURSE: "🎓",
}

# Hands-on material first.
_RESOURCE_PRIORITY = {
    ResourceType.INTERACTIVE: 0,
    ResourceType.VIDEO: 1,
    ResourceType.COURSE: 2,
    ResourceType.ARTICLE: 3,
    ResourceType.DOCS: 4,
}

_MAX_FLAMES = 5
_NEXT_ACTION_RESOURCES = 4


def format_streak(streak: int) -> str:
    """Return flame icons (capped at five) followed by the day count."""
    icons = "🔥" * min(streak, _MAX_FLAMES) if streak > 0 else "💤"
    return f"{icons} {streak} day streak"


def format_percent(percent: float) -> str:
    return f"{round(percent)}%"


def format_progress_bar(percent: float, width: int = 20) -> str:
    filled = max(0, min(width, round(percent / 100 * width)))
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def sort_resources(resources: Iterable[ResourceDef]) -> List[ResourceDef]:
    return sorted(resources, key=lambda resource: _RESOURCE_PRIORITY[resource.type])


def format_resource(resource: ResourceDef) -> str:
    duration = f" ({resource.duration})" if resource.duration else ""
    return f"{RESOURCE_ICONS[resource.type]} {resource.title}{duration} - {resource.url}"


def format_task(task: Task) -> str:
    marker = "x" if task.done else " "
    return f"[{marker}] {task.text}"


def format_quest_line(quest: Quest) -> str:
    marker = "✅" if quest.completed else "📦"
    done = progress.completed_task_count(quest)
    return (
        f"{marker} {quest.title} | Week {quest.week} • {quest.estimated_minutes} min • "
        f"{quest.xp} XP | {done}/{len(quest.tasks)}"
    )


def dashboard_lines(view: ProgressView) -> List[str]:
    metrics = view.metrics
    return [
        f"Overall: {format_progress_bar(metrics.overall_percent)} {format_percent(metrics.overall_percent)}",
        f"Level: {metrics.level}",
        f"XP Earned: {metrics.total_xp}/{metrics.max_xp}",
        f"Quests: {metrics.completed_count}/{metrics.quest_count}",
        f"Streak: {format_streak(view.streak.streak)}",
    ]


def next_action_lines(quest: Quest) -> List[str]:
    """Describe the quest to work on now, its open task and top resources."""
    done = progress.completed_task_count(quest)
    lines = [
        f"{quest.title} ({quest.estimated_minutes} min • {quest.xp} XP)",
        quest.description,
        f"{format_progress_bar(progress.task_progress_percent(quest))} {done}/{len(quest.tasks)} tasks",
    ]
    resources = sort_resources(quest.resources)
    for resource in resources[:_NEXT_ACTION_RESOURCES]:
        lines.append(f"  {format_resource(resource)}")
    if len(resources) > _NEXT_ACTION_RESOURCES:
        lines.append(f"  +{len(resources) - _NEXT_ACTION_RESOURCES} more in quest details")
    task = progress.next_task(quest)
    if task is not None:
        lines.append(f"Next: {task.text}")
    return lines


def quest_detail_lines(quest: Quest) -> List[str]:
    lines = [format_quest_line(quest), quest.description]
    for index, task in enumerate(quest.tasks, start=1):
        lines.append(f"{index}. {format_task(task)}")
    if quest.resources:
        lines.append("Resources:")
        lines.extend(f"  {format_resource(resource)}" for resource in quest.resources)
    return lines


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")
