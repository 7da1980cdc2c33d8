"""
Tests for settings and task file path resolution.
"""
import os

from task_tracker.config import DEFAULT_TASKS_FILE, get_settings, resolve_tasks_path


def test_default_path_is_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_settings().file == DEFAULT_TASKS_FILE
    assert resolve_tasks_path() == tmp_path / DEFAULT_TASKS_FILE


def test_environment_override(tmp_path, monkeypatch):
    monkeypatch.setenv("TASK_TRACKER_FILE", str(tmp_path / "mine.json"))
    assert resolve_tasks_path() == tmp_path / "mine.json"


def test_blank_environment_value_uses_default(monkeypatch):
    monkeypatch.setenv("TASK_TRACKER_FILE", "  ")
    assert get_settings().file == DEFAULT_TASKS_FILE


def test_explicit_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("TASK_TRACKER_FILE", str(tmp_path / "env.json"))
    assert resolve_tasks_path(str(tmp_path / "cli.json")) == tmp_path / "cli.json"


def test_relative_path_is_made_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = resolve_tasks_path("data/tasks.json")
    assert path.is_absolute()
    assert path == tmp_path / "data" / "tasks.json"
    assert os.path.isabs(str(path))


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    assert get_settings().log_level == "DEBUG"
