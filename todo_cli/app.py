"""Command dispatcher.

Maps a command name and its raw arguments to validate -> execute -> render.
The dispatcher holds no business logic of its own; which validator and
operation run for a name is decided by ``CommandRegistry``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence

from todo_cli.display import display as console_display
from todo_cli.registry import CommandRegistry
from todo_cli.store import TodoStore

logger = logging.getLogger(__name__)


def run_command(store: TodoStore, command: Optional[str], params: Sequence[Any]) -> List[str]:
    """Run one command against a store.

    Args:
        store: Storage handle holding the collection
        command: Command name, e.g. ``"add"``
        params: Raw positional arguments for the command

    Returns:
        Display lines for the outcome

    Raises:
        AppError: On unknown command, invalid arguments or missing todo
    """
    spec = CommandRegistry.get_command(command)
    validated = spec.validate(params)
    logger.debug(f"Running '{spec.name}' with {validated!r}")
    result = spec.execute(store, validated)
    return spec.render(result)


def create_app(
    store: TodoStore,
    argv: Sequence[str],
    display: Callable[[Iterable[str]], None] = console_display,
) -> List[str]:
    """Run the command named in a full process argv and display its output.

    ``argv`` is laid out as ``[executable, script, command, *params]``; the
    first two entries are ignored.

    Returns:
        The lines handed to ``display``
    """
    command = argv[2] if len(argv) > 2 else None
    params = list(argv[3:])
    lines = run_command(store, command, params)
    display(lines)
    return lines
