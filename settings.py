"""JSON-based settings persistence for the prayer calendar."""

import json
import os

_DEFAULT_SETTINGS_PATH = os.path.join(
    os.path.expanduser("~"), ".prayer-calendar-settings.json")

_DEFAULTS = {
    "window_width": None,
    "window_height": None,
    "storage_path": None,
    "log_level": "INFO",
    "log_file": None,
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def settings_path() -> str:
    """Return the settings file path, honouring PRAYER_CALENDAR_SETTINGS."""
    return os.environ.get("PRAYER_CALENDAR_SETTINGS") or _DEFAULT_SETTINGS_PATH


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(settings_path(), "r", encoding="utf-8") as f:
            stored = json.load(f)
        for key in ("window_width", "window_height"):
            if key in stored and isinstance(stored[key], int):
                settings[key] = stored[key]
        for key in ("storage_path", "log_file"):
            if key in stored and isinstance(stored[key], str):
                settings[key] = stored[key]
        level = stored.get("log_level")
        if isinstance(level, str) and level.upper() in _LOG_LEVELS:
            settings["log_level"] = level.upper()
    except (FileNotFoundError, json.JSONDecodeError, OSError, AttributeError):
        pass
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(settings_path(), "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
