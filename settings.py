"""JSON-based settings persistence for the meeting calendar."""

import json
import logging
import os

from calendar_logic import MONDAY, SUNDAY

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".meeting-calendar-settings.json")

_WEEKDAYS = {"sunday": SUNDAY, "monday": MONDAY}

_DEFAULTS = {
    "first_weekday": "sunday",
    "meetings_file": os.path.join(os.path.expanduser("~"), ".meeting-calendar", "meetings.json"),
    "autosave": True,
    "window_width": None,
    "window_height": None,
    "log_level": "WARNING",
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return settings
    if not isinstance(stored, dict):
        return settings

    if stored.get("first_weekday") in _WEEKDAYS:
        settings["first_weekday"] = stored["first_weekday"]
    if isinstance(stored.get("meetings_file"), str) and stored["meetings_file"]:
        settings["meetings_file"] = os.path.expanduser(stored["meetings_file"])
    if "autosave" in stored and isinstance(stored["autosave"], bool):
        settings["autosave"] = stored["autosave"]
    for key in ("window_width", "window_height"):
        if key in stored and isinstance(stored[key], int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    level = stored.get("log_level")
    if isinstance(level, str) and isinstance(logging.getLevelName(level.upper()), int):
        settings["log_level"] = level.upper()
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def first_weekday_index(settings: dict) -> int:
    """Return the ``calendar`` weekday constant for the configured week start."""
    return _WEEKDAYS.get(settings.get("first_weekday"), SUNDAY)
