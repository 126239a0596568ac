"""Console-driven UI loops for questboard."""
from __future__ import annotations

import logging
from typing import Literal

from questboard.core.clock import Clock
from questboard.core.types import DayBoundary
from questboard.data.local_store import LocalStore
from questboard.data.repositories import QuestsRepository
from questboard.domain import progress
from questboard.domain.quest_state import Quest
from questboard.presentation.cli import config, render
from questboard.services.progress_service import ProgressService, ProgressState
from questboard.services.progress_store import ProgressStore

MenuAction = Literal["next_task", "browse", "settings", "quit"]

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the interactive CLI session."""
    settings = config.load_config()
    service = _build_progress_service(settings["day_boundary"])
    state = service.load_state()
    print("=== Unity Quest ===")
    while True:
        view = service.get_view(state)
        render.render_heading("Progress")
        render.render_lines(render.dashboard_lines(view))
        if view.next_quest is not None:
            render.render_heading("Next Action")
            render.render_lines(render.next_action_lines(view.next_quest))
        else:
            print("\nAll quests complete!")
        action = _main_menu_loop(has_next=view.next_quest is not None)
        if action == "quit":
            break
        if action == "next_task" and view.next_quest is not None:
            task = progress.next_task(view.next_quest)
            if task is not None:
                state = service.toggle_task(state, view.next_quest.id, task.id)
        elif action == "browse":
            state = _browse_quests(service, state)
        elif action == "settings":
            _toggle_day_boundary(service, settings)
    print("Goodbye!")


def _build_progress_service(day_boundary: DayBoundary) -> ProgressService:
    """Construct the ProgressService with concrete repositories and storage."""
    storage_path = config.get_storage_path()
    backend: LocalStore | None = LocalStore(storage_path)
    try:
        storage_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Progress will not be saved, storage unavailable: %s", exc)
        backend = None
    return ProgressService(
        quests_repo=QuestsRepository(),
        store=ProgressStore(backend),
        clock=Clock(day_boundary),
    )


def _main_menu_loop(*, has_next: bool) -> MenuAction:
    actions: list[tuple[MenuAction, str]] = []
    if has_next:
        actions.append(("next_task", "Toggle next task"))
    actions.extend(
        [
            ("browse", "Browse quests"),
            ("settings", "Switch day boundary (UTC/local)"),
            ("quit", "Quit"),
        ]
    )
    render.render_menu("Menu", [label for _, label in actions])
    return actions[_prompt_choice(len(actions))][0]


def _browse_quests(service: ProgressService, state: ProgressState) -> ProgressState:
    while True:
        render.render_menu("All Quests", [render.format_quest_line(quest) for quest in state.quests])
        print("0. Back")
        index = _prompt_choice(len(state.quests), allow_back=True)
        if index is None:
            return state
        state = _quest_detail_loop(service, state, state.quests[index].id)


def _quest_detail_loop(service: ProgressService, state: ProgressState, quest_id: str) -> ProgressState:
    while True:
        quest = _find_quest(state, quest_id)
        if quest is None:
            return state
        render.render_heading("Quest")
        render.render_lines(render.quest_detail_lines(quest))
        print("Select a task to toggle, or 0 to go back.")
        index = _prompt_choice(len(quest.tasks), allow_back=True)
        if index is None:
            return state
        state = service.toggle_task(state, quest.id, quest.tasks[index].id)


def _toggle_day_boundary(service: ProgressService, settings: dict[str, str]) -> None:
    settings["day_boundary"] = "local" if settings["day_boundary"] == "utc" else "utc"
    try:
        config.save_config(settings)
    except OSError as exc:
        logger.warning("Unable to save settings: %s", exc)
    service.clock = Clock(settings["day_boundary"])
    print(f"Day boundary set to {settings['day_boundary']}.")


def _find_quest(state: ProgressState, quest_id: str) -> Quest | None:
    return next((quest for quest in state.quests if quest.id == quest_id), None)


def _prompt_choice(choice_count: int, *, allow_back: bool = False) -> int | None:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if allow_back and index == -1:
            return None
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")
