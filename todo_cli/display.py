"""Console display sink for pre-formatted output lines."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console  # type: ignore[import-not-found]

console = Console()


def display(lines: Iterable[str], out: Optional[Console] = None) -> None:
    """Print each line as-is.

    Markup and highlighting are off so a title such as ``[x] done`` is
    printed literally.
    """
    target = out if out is not None else console
    for line in lines:
        target.print(line, markup=False, highlight=False, soft_wrap=True)
