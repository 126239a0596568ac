"""Calendar-date sources with an explicit day-boundary policy."""
from __future__ import annotations

from datetime import date, datetime, timezone

from questboard.core.types import DayBoundary

_VALID_BOUNDARIES: tuple[DayBoundary, ...] = ("utc", "local")


class Clock:
    """Return today's calendar date using UTC or local day boundaries."""

    def __init__(self, day_boundary: DayBoundary = "utc") -> None:
        if day_boundary not in _VALID_BOUNDARIES:
            raise ValueError(f"Unknown day boundary '{day_boundary}'.")
        self._day_boundary = day_boundary

    @property
    def day_boundary(self) -> DayBoundary:
        return self._day_boundary

    def today(self) -> date:
        """Return the current calendar date under the configured policy."""
        if self._day_boundary == "local":
            return datetime.now().astimezone().date()
        return datetime.now(timezone.utc).date()


class FixedClock(Clock):
    """Clock pinned to a given date, advanced manually."""

    def __init__(self, today: date) -> None:
        super().__init__("utc")
        self._today = today

    def today(self) -> date:
        return self._today

    def set_today(self, today: date) -> None:
        self._today = today
