"""
CLI Output Utilities

Rich console helpers shared by the calculator and preset commands.
"""

import json
from typing import Any

from rich.console import Console
from rich.table import Table


# Shared console; Rich falls back to ASCII where unicode is unsupported
console = Console()

# Plain-ASCII fallback for the info marker
_use_unicode = console.is_terminal and not console.legacy_windows


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_info(message: str) -> None:
    """Print info message in blue."""
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def create_parameter_table(title: str) -> Table:
    """
    Create the two-column Parameter/Value table used for calculator results.

    Args:
        title: Table title (may contain Rich markup)

    Returns:
        Empty table ready for ``add_row``
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Parameter", style="cyan", width=25)
    table.add_column("Value", style="green")
    return table


def print_formula(formula: str) -> None:
    """Print a substituted formula without number highlighting."""
    console.print(f"[bold]Formula:[/bold] {formula}", highlight=False)


def print_bullets(title: str, lines: list[str] | tuple[str, ...]) -> None:
    """
    Print a titled bullet list (tips, guidelines).

    Args:
        title: Heading printed above the list
        lines: One entry per bullet
    """
    console.print(f"[bold]{title}[/bold]")
    for line in lines:
        console.print(f"  • {line}", highlight=False)


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))
