"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

DAY_ABBR = ["S", "M", "T", "W", "T", "F", "S"]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

GRID_CELLS = 42  # 6 rows x 7 columns

# January 0001 and December 9999 would need padding days outside the
# range of datetime.date.
FIRST_MONTH = (1, 2)
LAST_MONTH = (9999, 11)


@dataclass(frozen=True)
class DayCell:
    calendar_date: date
    belongs_to_displayed_month: bool
    is_today: bool
    key: str


def day_key(d: date) -> str:
    """Return the canonical ``YYYY-MM-DD`` key for a day."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def is_same_date(a: date, b: date) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def sunday_weekday(d: date) -> int:
    """Weekday with Sunday=0 .. Saturday=6."""
    return (d.weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def build_month_grid(year: int, month: int, today: date | None = None) -> list[DayCell]:
    """Return the 42 day cells for a Sunday-first month view.

    The grid starts with the trailing days of the previous month, then
    every day of *month*, then the first days of the next month until
    there are always 6 full weeks so the calendar height stays constant.
    """
    if not FIRST_MONTH <= (year, month) <= LAST_MONTH:
        raise ValueError(f"{year:04d}-{month:02d} is outside the displayable range")
    if today is None:
        today = date.today()

    def _cell(d: date, in_month: bool) -> DayCell:
        return DayCell(d, in_month, is_same_date(d, today), day_key(d))

    first = date(year, month, 1)
    leading = sunday_weekday(first)

    cells: list[DayCell] = []
    for offset in range(leading, 0, -1):
        cells.append(_cell(first - timedelta(days=offset), False))

    for day in range(1, days_in_month(year, month) + 1):
        cells.append(_cell(date(year, month, day), True))

    ny, nm = next_month(year, month)
    day = 1
    while len(cells) < GRID_CELLS:
        cells.append(_cell(date(ny, nm, day), False))
        day += 1
    return cells


def clamp_month(year: int, month: int) -> tuple[int, int]:
    """Pin (year, month) to the range build_month_grid can lay out."""
    return max(FIRST_MONTH, min(LAST_MONTH, (year, month)))


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
