"""Storage handles for the todo collection.

The core only ever talks to a store through ``get()`` and ``set()``. Two
implementations ship with the package: an in-memory list for tests and
embedding, and a JSON file store used by the command line.
"""

from __future__ import annotations

import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional

import pydantic as pd

from todo_cli.errors import AppError
from todo_cli.models import Todo

logger = logging.getLogger(__name__)

_TODO_LIST_ADAPTER = pd.TypeAdapter(List[Todo])


class TodoStore(ABC):
    """Interface for todo collection storage.

    Implementations must return the full current collection from ``get()``
    (an empty list when nothing is stored, never None) and replace it
    entirely on ``set()``.
    """

    @abstractmethod
    def get(self) -> List[Todo]:
        """Return the current ordered collection."""
        pass

    @abstractmethod
    def set(self, todos: List[Todo]) -> None:
        """Replace the stored collection."""
        pass


class InMemoryTodoStore(TodoStore):
    """List-backed store living only as long as the process."""

    def __init__(self, todos: Optional[Iterable[Todo]] = None) -> None:
        self._todos: List[Todo] = list(todos) if todos is not None else []

    def get(self) -> List[Todo]:
        return self._todos

    def set(self, todos: List[Todo]) -> None:
        self._todos = list(todos)


class JsonFileTodoStore(TodoStore):
    """Store persisting the collection as a JSON array in a single file.

    Writes go to a temp file in the same directory which is then renamed over
    the target, so an interrupted write never leaves a truncated file behind.
    """

    def __init__(self, path: Path):
        """Initialize the file store.

        Args:
            path: JSON file holding the collection; it need not exist yet
        """
        self.path = Path(path)

    def get(self) -> List[Todo]:
        """Read the collection from disk.

        Returns:
            The stored todos, or an empty list if the file does not exist

        Raises:
            AppError: If the file exists but cannot be read or parsed
        """
        if not self.path.exists():
            logger.debug(f"No todo store at {self.path}, starting empty")
            return []
        try:
            content = self.path.read_text(encoding="utf-8")
        except (IOError, OSError, UnicodeDecodeError) as e:
            raise AppError(f"Could not read todo store at {self.path}: {e}") from e
        if not content.strip():
            return []
        try:
            return _TODO_LIST_ADAPTER.validate_json(content)
        except pd.ValidationError as e:
            raise AppError(f"Could not read todo store at {self.path}: {e}") from e

    def set(self, todos: List[Todo]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = _TODO_LIST_ADAPTER.dump_json(list(todos), indent=2)
        temp_path: Optional[Path] = None
        # Atomic write: write to temp, then rename
        try:
            with tempfile.NamedTemporaryFile(
                mode="wb", suffix=".json", dir=self.path.parent, delete=False
            ) as f:
                temp_path = Path(f.name)
                f.write(payload)
            temp_path.replace(self.path)
        except BaseException:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote {len(todos)} todo(s) to {self.path}")
