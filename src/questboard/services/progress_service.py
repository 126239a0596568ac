"""Progress orchestration: session state, read view and task toggles."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from questboard.core.clock import Clock
from questboard.data.repositories import QuestsRepository
from questboard.domain import progress
from questboard.domain.progress import ProgressMetrics
from questboard.domain.quest_state import Quest
from questboard.domain.streak import StreakState, record_activity
from questboard.services.progress_store import ProgressStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProgressState:
    """Session state: the reconciled quests plus the streak."""

    quests: Tuple[Quest, ...]
    streak: StreakState = field(default_factory=StreakState)


@dataclass(frozen=True, slots=True)
class ProgressView:
    quests: Tuple[Quest, ...]
    metrics: ProgressMetrics
    next_quest: Quest | None
    streak: StreakState


class ProgressService:
    """Single entry point for reading progress and toggling tasks."""

    def __init__(
        self,
        *,
        quests_repo: QuestsRepository,
        store: ProgressStore,
        clock: Clock | None = None,
    ) -> None:
        self._quests_repo = quests_repo
        self._store = store
        self._clock = clock or Clock()

    @property
    def clock(self) -> Clock:
        return self._clock

    @clock.setter
    def clock(self, clock: Clock) -> None:
        self._clock = clock

    def load_state(self) -> ProgressState:
        """Build the session state from the catalog and the stored snapshot."""
        snapshot = self._store.load()
        quests = progress.build_quests(self._quests_repo.all(), snapshot)
        if snapshot is None:
            return ProgressState(quests=quests)
        streak = StreakState(
            streak=snapshot.streak,
            last_activity_date=snapshot.last_activity_date,
        )
        return ProgressState(quests=quests, streak=streak)

    def get_view(self, state: ProgressState) -> ProgressView:
        return ProgressView(
            quests=state.quests,
            metrics=progress.compute_metrics(state.quests),
            next_quest=progress.next_quest(state.quests),
            streak=state.streak,
        )

    def toggle_task(self, state: ProgressState, quest_id: str, task_id: str) -> ProgressState:
        """Flip a task, advance the streak and persist the result.

        Unknown quest or task ids leave the state untouched and write nothing.
        """
        quests = progress.toggle_task(state.quests, quest_id, task_id)
        if quests is state.quests:
            logger.debug("Ignoring toggle for unknown task %s/%s", quest_id, task_id)
            return state
        streak = record_activity(state.streak, self._clock.today())
        updated = ProgressState(quests=quests, streak=streak)
        self._store.save(progress.to_snapshot(updated.quests, updated.streak))
        return updated
