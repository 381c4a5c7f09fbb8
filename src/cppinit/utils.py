"""Shared utility functions for cppinit.

Provides identifier helpers used by both the planner and the Jinja2
filters, and Rich-based console reporting.  Diagnostics go to a stderr
console so that a failing run leaves stdout clean.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def to_identifier(name: str) -> str:
    """Convert an arbitrary project name to a valid C/C++ identifier.

    Examples::

        to_identifier("mylib")   -> "mylib"
        to_identifier("my-lib")  -> "my_lib"
        to_identifier("3d.core") -> "_3d_core"
    """
    ident = re.sub(r"[^A-Za-z0-9_]", "_", name)
    if not ident or ident[0].isdigit():
        ident = "_" + ident
    return ident


def to_upper_snake(name: str) -> str:
    """Convert ``myProject`` or ``my-project`` to ``MY_PROJECT``.

    Used for include guards, so the result is always a valid macro name.
    """
    split = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return to_identifier(split).upper()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, subtitle: str = "") -> None:
    """Print a framed title, optionally followed by a dim subtitle."""
    console.print()
    console.print(Panel.fit(f"[bold magenta]{title}[/bold magenta]", border_style="magenta"))
    if subtitle:
        console.print(f"[dim]{subtitle}[/dim]")
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
