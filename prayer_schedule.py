"""Weekly prayer-time schedule for 2026 — pure lookups, no UI dependencies."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

SCHEDULE_YEAR = 2026
SEASON_START = date(2026, 1, 4)

# Minutes for the 1st, 2nd, 3rd, 4th (and 5th) Sunday-starting week of each
# month, transcribed from the printed schedule. Do not derive these.
SCHEDULE_2026: tuple[tuple[int, ...], ...] = (
    (5, 6, 7, 9),            # Jan: starts Jan 4
    (10, 11, 12, 14),        # Feb
    (15, 16, 17, 18, 19),    # Mar: Mar 29 is 19
    (20, 21, 22, 24),        # Apr
    (25, 26, 27, 29, 30),    # May: May 31 is 30
    (31, 32, 33, 34),        # Jun
    (35, 36, 37, 39),        # Jul
    (40, 41, 42, 44, 45),    # Aug: Aug 30 is 45
    (46, 47, 48, 49),        # Sep
    (50, 51, 52, 54),        # Oct
    (55, 56, 57, 58, 59),    # Nov: Nov 29 is 59
    (60, 60, 60, 60),        # Dec
)


def _local_date(d: date | datetime) -> date:
    """Strip the time of day, converting aware datetimes to local time first."""
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone()
        return d.date()
    return d


def week_start(d: date | datetime) -> date:
    """Return the Sunday on or before *d*."""
    d = _local_date(d)
    # date.weekday(): Monday=0 .. Sunday=6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def _first_sunday(year: int, month: int) -> date:
    first = date(year, month, 1)
    return first + timedelta(days=(6 - first.weekday()) % 7)


def target_minutes(d: date | datetime) -> int:
    """Return the scheduled prayer minutes for the week containing *d*.

    Total for every date: anything before the season start or outside
    2026 yields 0, which means "no target, not loggable".
    """
    day = _local_date(d)
    if day < SEASON_START or day.year != SCHEDULE_YEAR:
        return 0
    ws = week_start(day)

    row = SCHEDULE_2026[ws.month - 1]
    week_index = (ws.day - _first_sunday(ws.year, ws.month).day) // 7
    if 0 <= week_index < len(row):
        return row[week_index]
    return 0


def month_base_minutes(year: int, month: int) -> int:
    """Return the first non-zero target within the month, or 0."""
    for day in range(1, calendar.monthrange(year, month)[1] + 1):
        minutes = target_minutes(date(year, month, day))
        if minutes > 0:
            return minutes
    return 0
