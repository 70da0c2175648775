"""JSON-based appearance settings for the date-picker dialog."""

import json
import logging
import os

from calendar_logic import Weekday

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-date-picker-settings.json")

_DEFAULTS = {
    "background": "white",
    "foreground": "blue",
    "highlight": "yellow",
    "font_size": 10,
    "week_start": "SUNDAY",
}


def _merge_valid(settings: dict, stored: dict) -> dict:
    """Copy the well-formed keys of *stored* over *settings*."""
    for key in ("background", "foreground", "highlight"):
        if isinstance(stored.get(key), str) and stored[key]:
            settings[key] = stored[key]
    size = stored.get("font_size")
    if isinstance(size, int) and not isinstance(size, bool) and 6 <= size <= 72:
        settings["font_size"] = size
    if stored.get("week_start") in Weekday.__members__:
        settings["week_start"] = stored["week_start"]
    return settings


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings
    if not isinstance(stored, dict):
        return settings
    return _merge_valid(settings, stored)


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def update_settings(partial: dict) -> dict:
    """Merge *partial* into the stored settings, save and return the result.

    Malformed values are dropped the same way ``load_settings`` drops them.
    """
    settings = _merge_valid(load_settings(), partial)
    save_settings(settings)
    return settings


def week_start(settings: dict) -> Weekday:
    """Return the configured first day of the week."""
    return Weekday[settings["week_start"]]
