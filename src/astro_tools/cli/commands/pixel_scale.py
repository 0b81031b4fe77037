"""
Pixel Scale Command

Calculates pixel scale and field of view for a telescope and camera setup.
"""

import typer

from astro_tools.api.calculators import PixelScaleCalculator
from astro_tools.api.core.enums import SamplingQuality
from astro_tools.api.pixel_scale import SAMPLING_GUIDELINES, PixelScaleResult
from astro_tools.api.presets import CameraModel, TelescopePreset
from astro_tools.cli.utils.output import (
    console,
    create_parameter_table,
    print_bullets,
    print_error,
    print_formula,
    print_json,
)


# Display colors per sampling class
_SAMPLING_STYLES: dict[SamplingQuality, str] = {
    SamplingQuality.EXCELLENT: "bold green",
    SamplingQuality.GOOD: "green",
    SamplingQuality.FAIR: "yellow",
    SamplingQuality.POOR: "red",
}


def pixel_scale(
    focal_length: float | None = typer.Option(
        None,
        "--focal-length",
        "-f",
        min=1.0,
        help="Telescope focal length in mm (overrides --telescope) (default: 1000)",
    ),
    pixel_size: float | None = typer.Option(
        None,
        "--pixel-size",
        "-p",
        min=1.0,
        help="Pixel size in μm (overrides --camera) (default: 4.5)",
    ),
    sensor_width: float | None = typer.Option(
        None,
        "--sensor-width",
        "-W",
        min=1.0,
        help="Sensor width in mm (overrides --camera) (default: 36)",
    ),
    sensor_height: float | None = typer.Option(
        None,
        "--sensor-height",
        "-H",
        min=1.0,
        help="Sensor height in mm (overrides --camera) (default: 24)",
    ),
    camera: CameraModel | None = typer.Option(
        None,
        "--camera",
        "-c",
        help="Fill sensor size and pixel size from a camera preset",
    ),
    telescope: TelescopePreset | None = typer.Option(
        None,
        "--telescope",
        "-t",
        help="Fill focal length from a telescope preset",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Calculate pixel scale (arcseconds per pixel) and field of view.

    Helps determine whether your setup is properly sampled for the seeing
    conditions.

    Examples:
        astro-tools pixel-scale
        astro-tools pixel-scale --telescope 80mm_f5 --camera zwo_asi533mc
        astro-tools pixel-scale -f 2000 -p 3.76 -W 35.9 -H 24 --json
    """
    try:
        calculator = PixelScaleCalculator()

        # Presets first, then explicit values
        if camera is not None:
            calculator.apply_camera_preset(camera)
        if telescope is not None:
            calculator.apply_telescope_preset(telescope)
        if focal_length is not None:
            calculator.focal_length_mm = focal_length
        if pixel_size is not None:
            calculator.pixel_size_microns = pixel_size
        if sensor_width is not None:
            calculator.sensor_width_mm = sensor_width
        if sensor_height is not None:
            calculator.sensor_height_mm = sensor_height

        result = calculator.calculate()

        if json_output:
            print_json(
                {
                    "inputs": {
                        "focal_length_mm": calculator.focal_length_mm,
                        "pixel_size_microns": calculator.pixel_size_microns,
                        "sensor_width_mm": calculator.sensor_width_mm,
                        "sensor_height_mm": calculator.sensor_height_mm,
                    },
                    "pixel_scale_arcsec_per_pixel": result.pixel_scale_arcsec_per_pixel,
                    "field_of_view": {
                        "width_degrees": result.field_of_view.width_degrees,
                        "height_degrees": result.field_of_view.height_degrees,
                    },
                    "sampling": result.sampling.value,
                    "formula": result.formula_text,
                }
            )
        else:
            _display_pixel_scale(calculator, result)

    except Exception as e:
        print_error(f"Failed to calculate pixel scale: {e}")
        raise typer.Exit(code=1) from e


def _display_pixel_scale(calculator: PixelScaleCalculator, result: PixelScaleResult) -> None:
    """Display pixel scale results with the formula and sampling guidelines."""
    table = create_parameter_table("[bold cyan]Pixel Scale & Field of View[/bold cyan]")

    table.add_row("Focal Length", f"{calculator.focal_length_mm:g}mm")
    table.add_row("Pixel Size", f"{calculator.pixel_size_microns:g}μm")
    table.add_row("Sensor", f"{calculator.sensor_width_mm:g}×{calculator.sensor_height_mm:g}mm")
    table.add_section()
    table.add_row("Pixel Scale", f"{result.pixel_scale_arcsec_per_pixel:.2f} arcsec/pixel")
    fov = result.field_of_view
    table.add_row(
        "Field of View",
        f"{fov.width_degrees:.2f}° × {fov.height_degrees:.2f}° ({fov.width_arcmin:.1f}' × {fov.height_arcmin:.1f}')",
    )
    style = _SAMPLING_STYLES[result.sampling]
    table.add_row("Sampling Quality", f"[{style}]{result.sampling.value}[/{style}]")

    console.print(table)
    console.print()
    print_formula(result.formula_text)
    console.print()
    print_bullets("Sampling Guidelines:", list(SAMPLING_GUIDELINES.values()))
