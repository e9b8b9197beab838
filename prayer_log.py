"""Completion log for scheduled prayer days, persisted as one snapshot."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from datetime import date

from calendar_logic import day_key, days_in_month
from prayer_schedule import target_minutes
from storage import LocalStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "prayerLogs"


@dataclass(frozen=True)
class LogEntry:
    date: str
    minutes: int
    completed: bool


@dataclass(frozen=True)
class MonthProgress:
    completed: int
    total: int
    percentage: int


class PrayerLog:
    """In-memory log cache that writes through to local storage.

    An entry exists only for days marked completed, and never for a
    day whose target is 0.
    """

    def __init__(self, storage: LocalStorage, entries: dict[str, LogEntry] | None = None) -> None:
        self._storage = storage
        self._entries: dict[str, LogEntry] = dict(entries or {})

    @classmethod
    def load(cls, storage: LocalStorage) -> "PrayerLog":
        """Read the log from *storage*.

        Malformed JSON raises json.JSONDecodeError; a value of the wrong
        shape raises ValueError. Nothing is repaired.
        """
        raw = storage.get_item(STORAGE_KEY)
        if raw is None:
            return cls(storage)
        parsed = json.loads(raw)
        if not isinstance(parsed, dict):
            raise ValueError(f"{STORAGE_KEY} must be a JSON object, got {type(parsed).__name__}")

        entries: dict[str, LogEntry] = {}
        for key, value in parsed.items():
            if not isinstance(value, dict):
                raise ValueError(f"{STORAGE_KEY}[{key!r}] must be an object")
            missing = {"date", "minutes", "completed"} - value.keys()
            if missing:
                raise ValueError(f"{STORAGE_KEY}[{key!r}] lacks {', '.join(sorted(missing))}")
            minutes = value["minutes"]
            if isinstance(minutes, bool) or not isinstance(minutes, int):
                raise ValueError(f"{STORAGE_KEY}[{key!r}] minutes must be an integer")
            entries[key] = LogEntry(
                date=str(value["date"]),
                minutes=minutes,
                completed=bool(value["completed"]),
            )
        logger.info("Loaded %d prayer log entries", len(entries))
        return cls(storage, entries)

    def save(self) -> None:
        self._write(self._entries)

    def _write(self, entries: dict[str, LogEntry]) -> None:
        snapshot = {key: asdict(entry) for key, entry in entries.items()}
        self._storage.set_item(STORAGE_KEY, json.dumps(snapshot))

    def snapshot(self) -> dict[str, dict]:
        return {key: asdict(entry) for key, entry in self._entries.items()}

    # -------- Queries --------
    def get(self, d: date) -> LogEntry | None:
        return self._entries.get(day_key(d))

    def is_completed(self, d: date) -> bool:
        entry = self._entries.get(day_key(d))
        return entry is not None and entry.completed

    def __contains__(self, d: date) -> bool:
        return day_key(d) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # -------- Mutation --------
    def toggle(self, d: date) -> bool:
        """Flip the completion state of *d*. Returns True if the log changed.

        The new snapshot is written before the in-memory log is replaced,
        so a failed write leaves both unchanged.
        """
        minutes = target_minutes(d)
        if minutes == 0:
            return False

        key = day_key(d)
        entries = dict(self._entries)
        if self.is_completed(d):
            del entries[key]
        else:
            entries[key] = LogEntry(date=key, minutes=minutes, completed=True)
        self._write(entries)
        self._entries = entries

        if key in entries:
            logger.info("Marked %s complete (%d min)", key, minutes)
        else:
            logger.info("Unmarked %s", key)
        return True


def load_prayer_log(path: str) -> PrayerLog:
    """Open the storage file at *path* and load the log; bad content is fatal."""
    try:
        return PrayerLog.load(LocalStorage(path))
    except ValueError:  # includes json.JSONDecodeError
        logger.exception("Could not read prayer log from %s", path)
        raise


def month_progress(log: PrayerLog, year: int, month: int) -> MonthProgress:
    """Aggregate completion over the scheduled days of one month."""
    total = 0
    completed = 0
    for day in range(1, days_in_month(year, month) + 1):
        d = date(year, month, day)
        if target_minutes(d) == 0:
            continue
        total += 1
        if log.is_completed(d):
            completed += 1

    if total == 0:
        return MonthProgress(completed, total, 0)
    # half-up, not banker's rounding
    percentage = math.floor(100 * completed / total + 0.5)
    return MonthProgress(completed, total, percentage)
