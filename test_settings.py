"""Settings file: defaults, type filtering, round trip."""

import json
import logging

import pytest

from log_setup import setup_logging
from settings import load_settings, save_settings, settings_path


@pytest.fixture(autouse=True)
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setenv("PRAYER_CALENDAR_SETTINGS", str(path))
    return path


def test_path_follows_environment(settings_file):
    assert settings_path() == str(settings_file)


def test_defaults_when_missing():
    settings = load_settings()
    assert settings["window_width"] is None
    assert settings["storage_path"] is None
    assert settings["log_level"] == "INFO"


def test_malformed_file_falls_back_to_defaults(settings_file):
    settings_file.write_text("not json", encoding="utf-8")
    assert load_settings()["log_level"] == "INFO"


def test_wrong_types_are_ignored(settings_file):
    settings_file.write_text(json.dumps({
        "window_width": "wide",
        "window_height": 480,
        "storage_path": 12,
        "log_level": "chatty",
    }), encoding="utf-8")
    settings = load_settings()
    assert settings["window_width"] is None
    assert settings["window_height"] == 480
    assert settings["storage_path"] is None
    assert settings["log_level"] == "INFO"


def test_round_trip(tmp_path):
    settings = load_settings()
    settings["window_width"] = 360
    settings["storage_path"] = str(tmp_path / "logs.json")
    settings["log_level"] = "debug"
    save_settings(settings)

    loaded = load_settings()
    assert loaded["window_width"] == 360
    assert loaded["storage_path"] == str(tmp_path / "logs.json")
    assert loaded["log_level"] == "DEBUG"


def test_setup_logging_is_idempotent(tmp_path):
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging("DEBUG", str(tmp_path / "logs" / "app.log"))
        added = [h for h in root.handlers if h not in before]
        setup_logging("WARNING", str(tmp_path / "other.log"))
        again = [h for h in root.handlers if h not in before]

        assert len(added) == 2
        assert again == added
        assert root.level == logging.WARNING
        assert (tmp_path / "logs" / "app.log").exists()
        assert not (tmp_path / "other.log").exists()
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)
