"""
Astro Tools CLI - Main Application

This is the main entry point for the astrophotography calculator command-line interface.
"""

import logging

import typer
from click import Context
from rich.console import Console
from typer.core import TyperGroup

from astro_tools.cli.commands import exposure, pixel_scale, presets


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="astro-tools",
    help="Astrophotography exposure and pixel scale calculators",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Astro Tools CLI

    Plan astrophotography sessions from the command line.

    [bold green]Examples:[/bold green]

        astro-tools npf --focal-length 14 --aperture 2.8
        astro-tools pixel-scale --telescope 80mm_f5 --camera zwo_asi533mc
        astro-tools presets cameras
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from astro_tools.cli import __version__

    console.print(f"[bold]Astro Tools CLI[/bold] version [cyan]{__version__}[/cyan]")


# Calculators
app.command("npf", rich_help_panel="Calculators")(exposure.npf)
app.command("pixel-scale", rich_help_panel="Calculators")(pixel_scale.pixel_scale)

# Reference Data
app.add_typer(
    presets.app,
    name="presets",
    help="Camera and telescope presets",
    rich_help_panel="Reference Data",
)


if __name__ == "__main__":
    app()
