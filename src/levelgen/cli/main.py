"""Typer CLI for image-to-layout compilation."""

import logging
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer

from levelgen.application import LayoutOutput, get_factory
from levelgen.application.config import ConfigError, config_to_layout, load_config
from levelgen.cli.commands import display_load_error, presets_app, validate_command
from levelgen.infrastructure import ExporterRegistry, FileAssetResolver

app = typer.Typer(
    name="levelgen",
    help="Compile images into object layouts and manage layout presets.",
)

app.command(name="validate")(validate_command)
app.add_typer(presets_app, name="presets")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """Compile images into object layouts and manage layout presets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _print_summary(result: LayoutOutput) -> None:
    typer.echo(f"Compiled '{result.name}': {result.placement_count} placement(s)")
    for object_key, count in sorted(Counter(p.object_key for p in result.placements).items()):
        typer.echo(f"  {object_key}: {count}")


@app.command(name="compile")
def compile_layout(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout configuration"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, json, csv"),
    ] = "summary",
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Write the export file into this directory"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option(
            "--project-name",
            help="Base name for exported files (default: config file name)",
        ),
    ] = None,
) -> None:
    """Compile a layout image into placements.

    Image paths in the configuration are resolved relative to the
    configuration file.

    Example:
        levelgen compile level-01.json --format json --output-dir out/
    """
    available = ExporterRegistry.available_formats()
    if output_format != "summary" and output_format not in available:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: summary, {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    layout = config_to_layout(config, FileAssetResolver(config_file.parent))
    factory = get_factory()
    result = factory.create_compile_command().execute(layout)

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "summary":
        _print_summary(result)
        return

    if output_dir is None:
        typer.echo(ExporterRegistry.get(output_format)().export_string(result))
        return

    try:
        path = factory.create_export_manager(output_dir).export_single(
            output_format, result, project_name or config_file.stem
        )
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Exported {result.placement_count} placement(s) to {path}")


if __name__ == "__main__":
    app()
