import json

import pytest

import settings
from calendar_logic import Weekday


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path


def test_defaults_when_missing(settings_file):
    assert settings.load_settings() == settings._DEFAULTS


def test_round_trip(settings_file):
    s = settings.load_settings()
    s["background"] = "black"
    s["font_size"] = 24
    s["week_start"] = "MONDAY"
    settings.save_settings(s)

    loaded = settings.load_settings()
    assert loaded["background"] == "black"
    assert loaded["font_size"] == 24
    assert settings.week_start(loaded) is Weekday.MONDAY


def test_malformed_file_falls_back(settings_file):
    settings_file.write_text("{not json", encoding="utf-8")
    assert settings.load_settings() == settings._DEFAULTS


def test_invalid_values_ignored(settings_file):
    settings_file.write_text(json.dumps({
        "background": 3,
        "foreground": "",
        "highlight": "red",
        "font_size": True,
        "week_start": "FUNDAY",
        "unknown": 1,
    }), encoding="utf-8")

    loaded = settings.load_settings()
    assert loaded["background"] == "white"
    assert loaded["foreground"] == "blue"
    assert loaded["highlight"] == "red"
    assert loaded["font_size"] == 10
    assert loaded["week_start"] == "SUNDAY"
    assert "unknown" not in loaded


def test_non_object_json_ignored(settings_file):
    settings_file.write_text("[1, 2]", encoding="utf-8")
    assert settings.load_settings() == settings._DEFAULTS


def test_update_settings_merges_and_saves(settings_file):
    saved = settings.update_settings({
        "background": "black",
        "font_size": 18,
        "week_start": "MONDAY",
        "highlight": "",
        "foreground": None,
    })
    assert saved["background"] == "black"
    assert saved["font_size"] == 18
    assert saved["highlight"] == "yellow"
    assert saved["foreground"] == "blue"
    assert settings.load_settings() == saved

    again = settings.update_settings({"font_size": 200})
    assert again["font_size"] == 18
    assert again["week_start"] == "MONDAY"
