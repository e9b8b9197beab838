"""Local storage file behaviour and the tray icon image."""

from datetime import date
from types import SimpleNamespace

import pytest

from icon_gen import ICON_SIZE, create_icon_image, icon_text, refresh_tray, tray_title
from storage import LocalStorage


def test_storage_round_trip(tmp_path):
    path = str(tmp_path / "storage.json")
    store = LocalStorage(path)
    assert store.get_item("prayerLogs") is None

    store.set_item("prayerLogs", "{}")
    store.set_item("other", "x")
    reopened = LocalStorage(path)
    assert reopened.get_item("prayerLogs") == "{}"
    assert sorted(reopened.keys()) == ["other", "prayerLogs"]

    reopened.remove_item("other")
    assert LocalStorage(path).keys() == ["prayerLogs"]


def test_storage_rejects_non_object(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        LocalStorage(str(path))


def test_remove_missing_key_does_not_write(tmp_path):
    path = tmp_path / "storage.json"
    LocalStorage(str(path)).remove_item("nothing")
    assert not path.exists()


@pytest.mark.parametrize("today, text", [
    (date(2025, 12, 31), "-"),
    (date(2026, 1, 4), "5"),
    (date(2026, 12, 31), "60"),
])
def test_icon_text(today, text):
    assert icon_text(today) == text


def test_icon_image_size():
    img = create_icon_image(date(2026, 8, 30))
    assert img.size == (ICON_SIZE, ICON_SIZE)
    assert img.mode == "RGBA"
    # text was drawn on the accent background
    assert len(img.getcolors(ICON_SIZE * ICON_SIZE)) > 1


@pytest.mark.parametrize("today, title", [
    (date(2025, 12, 31), "Prayer Calendar"),
    (date(2026, 1, 11), "Prayer Calendar - today 6 min"),
])
def test_tray_title(today, title):
    assert tray_title(today) == title


def test_refresh_tray_follows_the_week():
    tray = SimpleNamespace(icon=None, title="")
    refresh_tray(tray, date(2026, 1, 10))
    assert tray.title == "Prayer Calendar - today 5 min"

    refresh_tray(tray, date(2026, 1, 11))
    assert tray.title == "Prayer Calendar - today 6 min"
    assert tray.icon.size == (ICON_SIZE, ICON_SIZE)
