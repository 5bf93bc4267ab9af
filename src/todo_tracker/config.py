# src/todo_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per invocation, passed explicitly to whoever needs it.
- No module-level singleton: every get_settings() call re-reads the environment,
  which keeps tests isolated.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO_TRACKER"

DEFAULT_STORE_FILENAME = ".todo-tracker.json"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


ENV_VARS = {
    _k("STORE_PATH"): f"Task file location (default: ~/{DEFAULT_STORE_FILENAME}).",
    _k("LOG_LEVEL"): f"Console logging level (default: {DEFAULT_LOG_LEVEL}).",
    _k("LOG_FILE"): "Optional file that receives full DEBUG logs.",
}


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_store_path() -> Path:
    return Path.home() / DEFAULT_STORE_FILENAME


@dataclass(frozen=True, slots=True)
class Settings:
    store_path: Path
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env(*, use_dotenv: bool = True) -> "Settings":
        if use_dotenv:
            # .env is looked up from the working directory; real env vars win.
            load_dotenv(find_dotenv(usecwd=True), override=False)

        store_path = _env_path(_k("STORE_PATH"), None) or default_store_path()
        log_level = _env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
        log_file = _env_path(_k("LOG_FILE"), None)

        return Settings(store_path=store_path, log_level=log_level, log_file=log_file)


def get_settings() -> Settings:
    return Settings.from_env()


def describe_env_vars() -> str:
    lines = ["Environment variables:"]
    for name, help_text in ENV_VARS.items():
        lines.append(f"  {name:<26} {help_text}")
    return "\n".join(lines)
