"""
NPF Exposure Command

Calculates the maximum exposure time before stars trail.
"""

import typer

from astro_tools.api.calculators import ExposureTimeCalculator
from astro_tools.api.exposure import EXPOSURE_TIPS, ExposureResult
from astro_tools.api.presets import CameraModel
from astro_tools.cli.utils.output import (
    console,
    create_parameter_table,
    print_bullets,
    print_error,
    print_formula,
    print_json,
)


def npf(
    focal_length: float | None = typer.Option(
        None,
        "--focal-length",
        "-f",
        min=1.0,
        help="Focal length in mm (default: 50)",
    ),
    aperture: float | None = typer.Option(
        None,
        "--aperture",
        "-a",
        min=0.5,
        help="Aperture as f-number (default: 2.8)",
    ),
    pixel_size: float | None = typer.Option(
        None,
        "--pixel-size",
        "-p",
        min=1.0,
        help="Pixel size in μm (overrides --camera) (default: 4.5)",
    ),
    declination: float = typer.Option(
        0.0,
        "--declination",
        "-d",
        min=-90.0,
        max=90.0,
        clamp=True,
        help="Target declination in degrees (0 = celestial equator, 90 = north pole)",
    ),
    camera: CameraModel | None = typer.Option(
        None,
        "--camera",
        "-c",
        help="Fill pixel size from a camera preset",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Calculate the maximum exposure time before stars start to trail (NPF rule).

    The NPF rule is more accurate than the traditional 500 rule, especially
    for modern cameras with small pixels.

    Examples:
        astro-tools npf
        astro-tools npf --focal-length 24 --aperture 1.4 --camera sony_a7r_iv
        astro-tools npf -f 14 -a 2.8 -p 5.9 -d 60 --json
    """
    try:
        calculator = ExposureTimeCalculator()

        # Preset first, then explicit values
        if camera is not None:
            calculator.apply_camera_preset(camera)
        if focal_length is not None:
            calculator.focal_length_mm = focal_length
        if aperture is not None:
            calculator.aperture_f_number = aperture
        if pixel_size is not None:
            calculator.pixel_size_microns = pixel_size
        calculator.declination_degrees = declination

        result = calculator.calculate()

        if json_output:
            low, high = result.conservative_range_seconds
            print_json(
                {
                    "inputs": {
                        "focal_length_mm": calculator.focal_length_mm,
                        "aperture_f_number": calculator.aperture_f_number,
                        "pixel_size_microns": calculator.pixel_size_microns,
                        "declination_degrees": calculator.declination_degrees,
                    },
                    "exposure_time_seconds": result.exposure_time_seconds,
                    "conservative_range_seconds": [low, high],
                    "formula": result.formula_text,
                }
            )
        else:
            _display_exposure(calculator, result)

    except Exception as e:
        print_error(f"Failed to calculate exposure time: {e}")
        raise typer.Exit(code=1) from e


def _display_exposure(calculator: ExposureTimeCalculator, result: ExposureResult) -> None:
    """Display the NPF result with its inputs, formula and tips."""
    table = create_parameter_table("[bold cyan]NPF (Night Photography Factor) Calculator[/bold cyan]")

    table.add_row("Focal Length", f"{calculator.focal_length_mm:g}mm")
    table.add_row("Aperture", f"f/{calculator.aperture_f_number:g}")
    table.add_row("Pixel Size", f"{calculator.pixel_size_microns:g}μm")
    table.add_row("Declination", f"{calculator.declination_degrees:g}°")

    console.print(table)
    console.print()

    low, high = result.conservative_range_seconds
    console.print(f"[bold]Maximum exposure:[/bold] [bold green]{result.exposure_time_seconds:.2f} seconds[/bold green]")
    console.print(f"[bold]For sharper stars:[/bold] {low:.2f}-{high:.2f} seconds")
    print_formula(result.formula_text)
    console.print()
    print_bullets("Tips:", EXPOSURE_TIPS)
