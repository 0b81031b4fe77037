"""
Preset Commands

Reference data for cameras and telescopes.
"""

import typer
from rich.table import Table

from astro_tools.api.presets import CAMERA_SPECS, TELESCOPE_SPECS
from astro_tools.cli.utils.output import console, print_error, print_info, print_json


app = typer.Typer(help="Camera and telescope presets")


@app.command("cameras", rich_help_panel="Reference Data")
def list_cameras(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    List camera presets and their sensor specifications.

    Example:
        astro-tools presets cameras
    """
    try:
        if json_output:
            print_json(
                {
                    specs.model.value: {
                        "name": specs.display_name,
                        "sensor_width_mm": specs.sensor_width_mm,
                        "sensor_height_mm": specs.sensor_height_mm,
                        "pixel_size_microns": specs.pixel_size_microns,
                    }
                    for specs in CAMERA_SPECS.values()
                }
            )
            return

        table = Table(
            title="Common Camera Sensors",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("Preset", style="dim", no_wrap=True)
        table.add_column("Camera", style="cyan", no_wrap=True)
        table.add_column("Sensor", style="green")
        table.add_column("Pixel Size", style="yellow")

        for model, specs in CAMERA_SPECS.items():
            table.add_row(
                model.value,
                specs.display_name,
                f"{specs.sensor_width_mm:g}×{specs.sensor_height_mm:g}mm",
                f"{specs.pixel_size_microns:g}μm",
            )

        console.print(table)
        print_info("Values are approximate manufacturer specifications")
        print_info("Use '--camera <preset>' with npf or pixel-scale to fill these values")

    except Exception as e:
        print_error(f"Failed to list cameras: {e}")
        raise typer.Exit(code=1) from e


@app.command("telescopes", rich_help_panel="Reference Data")
def list_telescopes(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    List telescope presets and their focal lengths.

    Example:
        astro-tools presets telescopes
    """
    try:
        if json_output:
            print_json(
                {
                    specs.preset.value: {
                        "name": specs.display_name,
                        "aperture_mm": specs.aperture_mm,
                        "focal_ratio": specs.focal_ratio,
                        "focal_length_mm": specs.focal_length_mm,
                    }
                    for specs in TELESCOPE_SPECS.values()
                }
            )
            return

        table = Table(
            title="Common Telescope Focal Lengths",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("Preset", style="dim", no_wrap=True)
        table.add_column("Telescope", style="cyan", no_wrap=True)
        table.add_column("Aperture", style="green")
        table.add_column("f-ratio", style="yellow")
        table.add_column("Focal Length", style="green")

        for preset, specs in TELESCOPE_SPECS.items():
            table.add_row(
                preset.value,
                specs.display_name,
                f"{specs.aperture_mm:g}mm",
                f"f/{specs.focal_ratio:g}",
                f"{specs.focal_length_mm:g}mm",
            )

        console.print(table)
        print_info("Use 'astro-tools pixel-scale --telescope <preset>' to fill the focal length")

    except Exception as e:
        print_error(f"Failed to list telescopes: {e}")
        raise typer.Exit(code=1) from e
