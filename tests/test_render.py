"""Tests for CLI rendering utilities."""
from datetime import date

from questboard.core.types import ResourceType
from questboard.domain import progress
from questboard.domain.defs import QuestDef, ResourceDef, TaskDef
from questboard.domain.streak import StreakState
from questboard.presentation.cli.render import (
    RESOURCE_ICONS,
    dashboard_lines,
    format_progress_bar,
    format_quest_line,
    format_resource,
    format_streak,
    next_action_lines,
    quest_detail_lines,
    sort_resources,
)
from questboard.services.progress_service import ProgressView


def _resource(title: str, resource_type: ResourceType) -> ResourceDef:
    return ResourceDef(title=title, url=f"https://example.com/{title}", type=resource_type)


def _quest(resources=()):
    quest_def = QuestDef(
        id="week1-day1",
        title="Day 1: Environment Setup",
        description="Install things",
        xp=100,
        estimated_minutes=60,
        week=1,
        tasks=(TaskDef(id="t1", text="Install Unity"), TaskDef(id="t2", text="Install VS Code")),
        resources=tuple(resources),
    )
    return progress.build_quests([quest_def])


def test_format_streak_flames_capped_at_five() -> None:
    assert format_streak(0) == "💤 0 day streak"
    assert format_streak(2) == "🔥🔥 2 day streak"
    assert format_streak(9) == "🔥🔥🔥🔥🔥 9 day streak"


def test_format_progress_bar_bounds() -> None:
    assert format_progress_bar(0, width=10) == "[----------]"
    assert format_progress_bar(50, width=10) == "[#####-----]"
    assert format_progress_bar(100, width=10) == "[##########]"


def test_every_resource_type_has_an_icon() -> None:
    assert set(RESOURCE_ICONS) == set(ResourceType)


def test_resources_sorted_hands_on_first() -> None:
    resources = [
        _resource("d", ResourceType.DOCS),
        _resource("a", ResourceType.ARTICLE),
        _resource("v", ResourceType.VIDEO),
        _resource("i", ResourceType.INTERACTIVE),
        _resource("c", ResourceType.COURSE),
    ]

    assert [resource.title for resource in sort_resources(resources)] == ["i", "v", "c", "a", "d"]


def test_format_resource_includes_duration() -> None:
    resource = ResourceDef(title="Intro", url="https://example.com", type=ResourceType.VIDEO, duration="5m")

    assert format_resource(resource) == "🎬 Intro (5m) - https://example.com"


def test_quest_line_shows_task_counts() -> None:
    quests = progress.toggle_task(_quest(), "week1-day1", "t1")

    line = format_quest_line(quests[0])

    assert line.startswith("📦 Day 1: Environment Setup")
    assert "Week 1 • 60 min • 100 XP" in line
    assert line.endswith("1/2")


def test_next_action_limits_resources() -> None:
    resources = [_resource(f"doc{index}", ResourceType.DOCS) for index in range(6)]
    (quest,) = _quest(resources)

    lines = next_action_lines(quest)

    assert sum(1 for line in lines if "📚" in line) == 4
    assert "  +2 more in quest details" in lines
    assert lines[-1] == "Next: Install Unity"


def test_quest_detail_lists_tasks_and_resources() -> None:
    (quest,) = _quest([_resource("Manual", ResourceType.DOCS)])

    lines = quest_detail_lines(quest)

    assert "1. [ ] Install Unity" in lines
    assert "Resources:" in lines


def test_dashboard_lines() -> None:
    quests = progress.toggle_task(progress.toggle_task(_quest(), "week1-day1", "t1"), "week1-day1", "t2")
    view = ProgressView(
        quests=quests,
        metrics=progress.compute_metrics(quests),
        next_quest=None,
        streak=StreakState(streak=1, last_activity_date=date(2024, 1, 1)),
    )

    lines = dashboard_lines(view)

    assert lines[0].endswith("100%")
    assert "Level: 1" in lines
    assert "XP Earned: 100/100" in lines
    assert "Streak: 🔥 1 day streak" in lines
