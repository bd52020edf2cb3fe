"""
Tests for configuration loading.
"""

import pytest
from pathlib import Path

from tracker.config import AppConfig, PathConfig


def test_default_paths(monkeypatch):
    monkeypatch.delenv("TRACKER_DATA_DIR", raising=False)
    monkeypatch.delenv("TRACKER_OUTPUT_DIR", raising=False)

    paths = PathConfig.default()

    assert paths.data_dir == paths.base_dir / "data"
    assert paths.output_dir == paths.base_dir / "output"
    assert paths.default_workout_file == paths.base_dir / "data" / "workouts.csv"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TRACKER_DATA_DIR", str(tmp_path / "in"))
    monkeypatch.setenv("TRACKER_OUTPUT_DIR", str(tmp_path / "out"))

    paths = PathConfig.default()

    assert paths.data_dir == Path(tmp_path / "in")
    assert paths.output_dir == Path(tmp_path / "out")


def test_log_level(monkeypatch):
    monkeypatch.setenv("TRACKER_LOG_LEVEL", "debug")
    assert AppConfig.load().log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("TRACKER_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        AppConfig.load()
