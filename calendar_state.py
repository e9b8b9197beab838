"""Displayed-month state and per-cell view data — no tkinter here."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from calendar_logic import (
    MONTH_NAMES,
    DayCell,
    build_month_grid,
    clamp_month,
    next_month,
    prev_month,
)
from prayer_log import PrayerLog
from prayer_schedule import target_minutes

logger = logging.getLogger(__name__)


class CalendarState:
    """Owns the (year, month) being displayed.

    Navigation has no bounds of its own and stops only at the ends of
    the datetime.date range. Listeners are called after every change.
    """

    def __init__(self, year: int | None = None, month: int | None = None,
                 clock: Callable[[], date] = date.today) -> None:
        self._clock = clock
        today = clock()
        self.year, self.month = clamp_month(
            year if year is not None else today.year,
            month if month is not None else today.month,
        )
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def _set(self, year: int, month: int) -> None:
        self.year, self.month = clamp_month(year, month)
        logger.debug("Displaying %04d-%02d", self.year, self.month)
        for listener in self._listeners:
            listener()

    def previous(self) -> None:
        self._set(*prev_month(self.year, self.month))

    def next(self) -> None:
        self._set(*next_month(self.year, self.month))

    def go_to_today(self) -> None:
        today = self._clock()
        self._set(today.year, today.month)

    def title(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    def grid(self) -> list[DayCell]:
        return build_month_grid(self.year, self.month, today=self._clock())


class TodayHandle:
    """Command object letting an outside trigger jump the calendar to today."""

    __slots__ = ("_state",)

    def __init__(self, state: CalendarState) -> None:
        self._state = state

    def go_to_today(self) -> None:
        self._state.go_to_today()


@dataclass(frozen=True)
class CellView:
    cell: DayCell
    day_number: int
    target: int
    target_label: str
    completed: bool
    enabled: bool


def cell_views(state: CalendarState, log: PrayerLog) -> list[CellView]:
    """Combine grid, schedule and log into render data for each cell."""
    views: list[CellView] = []
    for cell in state.grid():
        minutes = target_minutes(cell.calendar_date)
        views.append(CellView(
            cell=cell,
            day_number=cell.calendar_date.day,
            target=minutes,
            target_label=f"{minutes}m" if minutes > 0 else "",
            completed=log.is_completed(cell.calendar_date),
            enabled=minutes > 0,
        ))
    return views
