"""
Prayer log persistence across restarts.

Simulates the full lifecycle: start -> toggle -> exit -> restart -> verify.
Tests that completed days survive an app restart and that the file on disk
keeps the ``prayerLogs`` layout.
"""

import json
from datetime import date

import pytest

from prayer_log import STORAGE_KEY, PrayerLog
from storage import LocalStorage


@pytest.fixture
def storage_path(tmp_path):
    return str(tmp_path / "nested" / "storage.json")


def test_first_launch_starts_empty(storage_path):
    log = PrayerLog.load(LocalStorage(storage_path))
    assert log.snapshot() == {}


def test_completed_day_survives_restart(storage_path):
    log = PrayerLog.load(LocalStorage(storage_path))
    log.toggle(date(2026, 1, 4))

    # Restart: fresh storage object reading the same file
    reloaded = PrayerLog.load(LocalStorage(storage_path))
    assert reloaded.snapshot() == {
        "2026-01-04": {"date": "2026-01-04", "minutes": 5, "completed": True},
    }


def test_file_layout_matches_local_storage(storage_path):
    log = PrayerLog.load(LocalStorage(storage_path))
    log.toggle(date(2026, 5, 31))

    with open(storage_path, "r", encoding="utf-8") as f:
        on_disk = json.load(f)
    assert list(on_disk) == [STORAGE_KEY]
    assert isinstance(on_disk[STORAGE_KEY], str)
    assert json.loads(on_disk[STORAGE_KEY]) == {
        "2026-05-31": {"date": "2026-05-31", "minutes": 30, "completed": True},
    }


def test_unmark_survives_restart(storage_path):
    log = PrayerLog.load(LocalStorage(storage_path))
    log.toggle(date(2026, 7, 5))
    log.toggle(date(2026, 7, 6))

    second = PrayerLog.load(LocalStorage(storage_path))
    second.toggle(date(2026, 7, 5))

    third = PrayerLog.load(LocalStorage(storage_path))
    assert not third.is_completed(date(2026, 7, 5))
    assert third.is_completed(date(2026, 7, 6))
    assert len(third) == 1


def test_no_temp_file_left_behind(storage_path):
    log = PrayerLog.load(LocalStorage(storage_path))
    log.toggle(date(2026, 9, 6))
    with pytest.raises(FileNotFoundError):
        open(storage_path + ".tmp", "r", encoding="utf-8")


def test_malformed_storage_file_is_fatal(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{ broken", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        LocalStorage(str(path))
