"""CLI application entry point for svgdoc.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer

from svgdoc import __version__
from svgdoc.cli.output import (
    console,
    print_error,
    print_header,
    print_scene_info,
    print_shape_summary,
    print_step,
    print_success,
)
from svgdoc.config import LoggingConfig, RenderConfig, SvgDocSettings
from svgdoc.exceptions import DocumentWriteError, SceneError, SceneFormatError, SvgDocError
from svgdoc.io import DocumentWriter, SceneReader
from svgdoc.io.converter import SHAPE_TYPES
from svgdoc.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="svgdoc",
    help="Render JSON scene files into SVG markup.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svgdoc[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    scene: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON scene file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.svg)",
        ),
    ] = None,
    indent_step: Annotated[
        int,
        typer.Option(
            "--indent-step",
            "-i",
            help="Spaces per nesting level (0-16)",
            min=0,
            max=16,
        ),
    ] = 2,
    standalone: Annotated[
        bool,
        typer.Option(
            "--standalone",
            help="Wrap the elements in an <svg> root element",
        ),
    ] = False,
    xml_declaration: Annotated[
        bool,
        typer.Option(
            "--xml-declaration",
            help="Write an XML declaration first",
        ),
    ] = False,
    stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Write markup to standard output instead of a file",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
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
    """Render the shapes of a JSON scene file into SVG markup.

    Example:
        svgdoc drawing.json

    This will create drawing.svg with one element per shape, in scene order.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    if not scene.exists():
        print_error(
            f"Input file not found: {scene}",
            details=f"The file '{scene}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not scene.is_file():
        print_error(
            f"Input path is not a file: {scene}",
            details="Please provide a path to a JSON scene file.",
        )
        raise typer.Exit(code=1)

    # Markup on stdout must not be mixed with progress output
    quiet = quiet or stdout

    if not quiet:
        print_header(__version__)

    settings = SvgDocSettings(
        render=RenderConfig(
            indent_step=indent_step,
            xml_declaration=xml_declaration,
            standalone=standalone,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    render_logger = RenderLogger(logger)

    try:
        if not quiet:
            print_step("Loading scene")

        reader = SceneReader(scene)
        reader.load()
        document = reader.document

        if not quiet:
            print_scene_info(str(scene), reader.shape_count)

        if stdout:
            writer = DocumentWriter(document, config=settings.render, render_logger=render_logger)
            writer.write_to(sys.stdout, destination="<stdout>")
            return

        output_path = output if output is not None else DocumentWriter.get_output_path(scene)

        if not quiet:
            print_step("Rendering")

        writer = DocumentWriter(document, output_path, settings.render, render_logger)
        writer.save()

        if not quiet:
            stats = render_logger.stats
            if verbose:
                print_shape_summary(stats.element_counts)
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                elements=stats.elements_rendered,
            )

    except SceneFormatError as e:
        print_error(
            f"Could not load scene: {e.details}",
            details=f"Supported shape types: {', '.join(SHAPE_TYPES)}",
        )
        raise typer.Exit(code=1)
    except SceneError as e:
        print_error(f"Could not load scene: {e}")
        raise typer.Exit(code=1)
    except DocumentWriteError as e:
        print_error(f"Could not write document: {e.reason}")
        raise typer.Exit(code=1)
    except SvgDocError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "4 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    return f"{size_bytes / 1024:.0f} KB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
