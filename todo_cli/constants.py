"""Constants and configuration for the todo store location."""

import os
from pathlib import Path
from typing import Optional

TODO_CLI_DIR = ".todo-cli"
STORE_FILENAME = "todos.json"

STORE_PATH_ENV = "TODO_CLI_STORE"
DEBUG_ENV = "TODO_CLI_DEBUG"


def get_todo_cli_dir(root: Path) -> Path:
    """Get the .todo-cli directory path."""
    return root / TODO_CLI_DIR


def get_default_store_path(root: Path) -> Path:
    """Get the default JSON store path under ``root``."""
    return get_todo_cli_dir(root) / STORE_FILENAME


def resolve_store_path(explicit: Optional[Path] = None, root: Optional[Path] = None) -> Path:
    """Pick the store file: explicit path, then $TODO_CLI_STORE, then the default."""
    if explicit is not None:
        return Path(explicit)
    from_env = os.getenv(STORE_PATH_ENV)
    if from_env:
        return Path(from_env).expanduser()
    return get_default_store_path(root if root is not None else Path.cwd())


def debug_enabled() -> bool:
    """Check the $TODO_CLI_DEBUG flag."""
    return os.getenv(DEBUG_ENV, "false").lower() in ("true", "1", "yes")
