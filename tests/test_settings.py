"""
Tests for settings persistence.
"""

import json

from sudoku_utils.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_round_trip(tmp_path):
    path = tmp_path / "config.json"
    settings = dict(DEFAULT_SETTINGS, debug_enabled=True, max_generation_attempts=7)

    save_settings(settings, path)

    assert json.loads(path.read_text(encoding="utf-8"))["max_generation_attempts"] == 7
    assert load_settings(path) == settings


def test_partial_file_is_merged_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"image_cell_size": 30}', encoding="utf-8")

    settings = load_settings(path)
    assert settings["image_cell_size"] == 30
    assert settings["max_completion_attempts"] == DEFAULT_SETTINGS["max_completion_attempts"]


def test_corrupt_file_gives_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS
    assert "Failed to load settings" in caplog.text
