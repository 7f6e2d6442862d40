"""CLI entry point for the todo manager."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import click  # type: ignore[import-not-found]

from todo_cli.app import run_command
from todo_cli.constants import STORE_PATH_ENV, resolve_store_path
from todo_cli.display import display
from todo_cli.errors import AppError
from todo_cli.logging_utils import setup_logging
from todo_cli.registry import CommandRegistry
from todo_cli.store import JsonFileTodoStore

logger = logging.getLogger(__name__)


def commands_help() -> str:
    """Build the command overview shown under --help."""
    lines = ["\b", "Commands:"]
    for command in CommandRegistry.get_all_commands():
        synopsis = f"{command.name} {command.usage}".strip()
        lines.append(f"  {synopsis:<32} {command.summary}")
    return "\n".join(lines)


@click.command(
    name="todo",
    epilog=commands_help(),
    context_settings={"ignore_unknown_options": True},
)
@click.argument("command", required=False)
@click.argument("params", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"JSON file holding the todos (default: ${STORE_PATH_ENV} or ./.todo-cli/todos.json)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def main(
    ctx: click.Context,
    command: Optional[str],
    params: Tuple[str, ...],
    store_path: Optional[Path],
    verbose: bool,
) -> None:
    """Manage a todo list from the command line.

    Run COMMAND with its PARAMS against the todo store.
    """
    setup_logging(verbose)

    if command is None:
        click.echo(ctx.get_help())
        return

    path = resolve_store_path(store_path)
    logger.debug(f"Using todo store at {path}")
    store = JsonFileTodoStore(path)

    try:
        lines = run_command(store, command, list(params))
    except AppError as e:
        logger.debug(f"Command '{command}' failed: {e}")
        raise click.ClickException(str(e)) from e

    display(lines)


if __name__ == "__main__":
    main()
