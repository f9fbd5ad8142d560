"""Output helpers: JSON responses on stdout, notices on stderr via Rich."""
from __future__ import annotations

import contextlib
import json
from typing import Any, Iterator

import click
from rich.console import Console

# stdout is reserved for JSON so it can be piped into other tools.
console = Console(stderr=True)


def format_json(value: Any, compact: bool = False) -> str:
    if compact:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(value, ensure_ascii=False, indent=2)


def print_json(value: Any, compact: bool = False) -> None:
    click.echo(format_json(value, compact=compact))


@contextlib.contextmanager
def waiting(message: str) -> Iterator[None]:
    """Show a spinner on an interactive stderr while the body runs."""
    if not console.is_terminal:
        yield
        return
    with console.status(f"[bold cyan]{message}[/bold cyan]"):
        yield


def notice(message: str) -> None:
    console.print(f"  {message}", highlight=False)
