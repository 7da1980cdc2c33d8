"""
Unified configuration for the task document path and logging.

The document path resolution:
1. TASK_TRACKER_FILE environment variable (or `file` in a .env file)
2. Falls back to tasks.json in the current working directory

Relative paths are resolved against the working directory at the time
they are read, so the CLI always operates on the directory it runs in.

This module uses Pydantic Settings for type-safe configuration management
with support for .env files and environment variable overrides.
"""
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TASKS_FILE = "tasks.json"

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings for task-tracker.

    All configuration values can be set via TASK_TRACKER_* environment
    variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TASK_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    file: str = DEFAULT_TASKS_FILE

    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("file", mode="before")
    @classmethod
    def default_file(cls, v: Optional[str]) -> str:
        """Treat an empty value as unset."""
        if not v or not str(v).strip():
            return DEFAULT_TASKS_FILE
        return str(v).strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Optional[str]) -> str:
        if not v:
            return "WARNING"
        return str(v).strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()


def resolve_tasks_path(path: Optional[str] = None) -> Path:
    """
    Resolve a task document path to an absolute path.

    Args:
        path: Explicit path (e.g. from the --file option). If None, the
            configured setting is used.

    Returns:
        Absolute path to the task document
    """
    if path is None:
        path = get_settings().file
    return Path(os.path.abspath(os.path.expanduser(path)))
