"""Day-granularity activity streak."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StreakState:
    streak: int = 0
    last_activity_date: date | None = None


def record_activity(state: StreakState, today: date) -> StreakState:
    """Return the streak after an activity on ``today``.

    Activity on the same day leaves the state untouched, activity on the day
    after the last one extends the streak, anything else starts over at 1.
    """
    last = state.last_activity_date
    if last == today:
        return state
    if last is not None and last == today - timedelta(days=1):
        updated = StreakState(streak=state.streak + 1, last_activity_date=today)
    else:
        updated = StreakState(streak=1, last_activity_date=today)
    logger.debug("Streak %d -> %d on %s", state.streak, updated.streak, today.isoformat())
    return updated
