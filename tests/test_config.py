# tests/test_config.py
from __future__ import annotations

from shootboard.utils.config import default_settings, load_settings, save_settings, timing


def test_defaults_when_missing(tmp_path):
    settings = load_settings(tmp_path / "none.json")
    assert timing(settings, "autosave_debounce_ms") == 600
    assert timing(settings, "saved_revert_ms") == 1200
    assert timing(settings, "notification_ms") == 5000


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    save_settings({"timing": {"autosave_debounce_ms": 250}}, path)
    settings = load_settings(path)
    assert timing(settings, "autosave_debounce_ms") == 250
    assert timing(settings, "saved_revert_ms") == 1200
    assert settings["database"] == default_settings()["database"]


def test_corrupt_file_falls_back(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == default_settings()
