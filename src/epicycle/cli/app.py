"""CLI application entry point for epicycle.

This module provides the main CLI interface using Typer.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from epicycle import __version__
from epicycle.cli.output import (
    console,
    print_diagnostics,
    print_epicycles,
    print_error,
    print_header,
    print_image_info,
    print_step,
    print_success,
)
from epicycle.config import (
    EpicycleSettings,
    FourierConfig,
    LoggingConfig,
    RasterConfig,
    RenderConfig,
)
from epicycle.core import EpicyclePipeline
from epicycle.exceptions import EpicycleError
from epicycle.io import CurveRenderer, ImageReader
from epicycle.utils import configure_logging


class LogLevel(str, Enum):
    """Console log levels accepted by --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# Create the Typer app
app = typer.Typer(
    name="epicycle",
    help="Re-draw the silhouette in an image as a truncated Fourier series.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Epicycle[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def trace(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Path to a silhouette image (dark shape on light background)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the stroked curve to this PNG file",
        ),
    ] = None,
    order: Annotated[
        int,
        typer.Option(
            "--order",
            "-n",
            help="Series order N (lower = smoother, higher = more detail)",
            min=1,
        ),
    ] = 40,
    samples: Annotated[
        int,
        typer.Option(
            "--samples",
            help="Contour resample count used for the coefficients",
            min=512,
        ),
    ] = 2048,
    draw_samples: Annotated[
        int,
        typer.Option(
            "--draw-samples",
            help="Points in the reconstructed curve",
            min=1024,
        ),
    ] = 7000,
    downscale_w: Annotated[
        int,
        typer.Option(
            "--downscale-w",
            help="Working width in pixels (bigger = better contour, slower)",
            min=32,
        ),
    ] = 360,
    width: Annotated[
        int,
        typer.Option(
            "--width",
            help="Output width in pixels",
            min=200,
            max=8000,
        ),
    ] = 1920,
    height: Annotated[
        int,
        typer.Option(
            "--height",
            help="Output height in pixels",
            min=200,
            max=8000,
        ),
    ] = 1080,
    margin: Annotated[
        float,
        typer.Option(
            "--margin",
            help="Padding fraction around the curve",
            min=0.0,
        ),
    ] = 0.02,
    center_y: Annotated[
        float,
        typer.Option(
            "--center-y",
            help="Vertical pixel shift after scaling",
        ),
    ] = 0.0,
    top: Annotated[
        int,
        typer.Option(
            "--top",
            "-t",
            help="Number of largest epicycles to list",
            min=0,
        ),
    ] = 10,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Trace the largest dark shape in an image and re-draw it with epicycles.

    The outline is decomposed into 2N+1 rotating circles and reconstructed as
    a smooth closed curve, optionally stroked into a PNG.

    Example:
        epicycle cat.png --order 40 --output cat-fourier.png
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_image.exists():
        print_error(
            f"Input file not found: {input_image}",
            details=f"The file '{input_image}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_image.is_file():
        print_error(
            f"Input path is not a file: {input_image}",
            details="Please provide a path to an image file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = EpicycleSettings(
        raster=RasterConfig(downscale_w=downscale_w),
        fourier=FourierConfig(order=order, samples=samples, draw_samples=draw_samples),
        render=RenderConfig(
            width=width,
            height=height,
            margin=margin,
            center_y=center_y,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level.value if not quiet else LogLevel.ERROR.value,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        if not quiet:
            print_step("Loading image")

        reader = ImageReader(input_image)
        reader.load()

        if not quiet:
            print_image_info(
                image_path=str(input_image),
                mode=reader.mode,
                width=reader.size[0],
                height=reader.size[1],
            )
            print_step("Tracing silhouette")

        try:
            result = EpicyclePipeline(settings, logger=logger).run(reader.image)
        finally:
            reader.close()

        if not quiet:
            print_diagnostics(result, verbose=verbose)
            if top > 0:
                print_step("Epicycles")
                print_epicycles(result.coefficients.epicycles(), limit=top)

        if output is not None:
            if not quiet:
                print_step("Rendering")
            renderer = CurveRenderer(settings.render)
            renderer.save(renderer.render(result.curve, result.fit), output)

        if not quiet:
            print_success(
                total_time_s=result.stats.duration_seconds,
                order=result.coefficients.order,
                points=len(result.curve),
                scale=result.fit.scale,
                output_path=str(output) if output is not None else None,
            )

    except EpicycleError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write image: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
