"""Typer CLI for the shade sail measurement engine."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from shadesail.application import assess, convert_unit, diagonal_keys_for
from shadesail.application.config import (
    ConfigError,
    config_to_policy,
    config_to_rate_table,
    config_to_shade,
    load_config,
)
from shadesail.cli.commands import display_load_error, validate_command
from shadesail.domain.services.geometry import MAX_CORNERS, MIN_CORNERS
from shadesail.domain.services.units import DISPLAY_DECIMALS, UNIT_SUFFIX
from shadesail.domain.value_objects import Unit
from shadesail.infrastructure import (
    CalculationReportFormatter,
    JsonExporter,
    ValidationReportFormatter,
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="shadesail",
    help="Validate shade sail measurements and compute area, hardware and price.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Shade sail measurement engine."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def calculate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
) -> None:
    """Show area, perimeter, weight, edge hardware and price for a sail."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    rates = config_to_rate_table(config)
    assessment = assess(config_to_shade(config), rates, config_to_policy(config))

    if output_format is OutputFormat.JSON:
        typer.echo(JsonExporter(rates).export(assessment))
    else:
        typer.echo(CalculationReportFormatter(rates).format(assessment))
        if assessment.validation.issues:
            typer.echo()
            typer.echo(
                ValidationReportFormatter().format(
                    assessment.validation, assessment.config.unit
                )
            )

    if not assessment.is_valid:
        raise typer.Exit(code=1)


@app.command()
def diagonals(
    corners: Annotated[int, typer.Argument(help="Number of corners (3 to 6)")],
) -> None:
    """List every diagonal measurement for a sail shape."""
    keys = diagonal_keys_for(corners)
    if not keys and not MIN_CORNERS <= corners <= MAX_CORNERS:
        typer.echo(
            f"Error: corners must be between {MIN_CORNERS} and {MAX_CORNERS}",
            err=True,
        )
        raise typer.Exit(code=1)
    if not keys:
        typer.echo("A triangle has no diagonals.")
        return
    typer.echo(", ".join(keys))


@app.command()
def convert(
    value: Annotated[float, typer.Argument(help="Length to convert")],
    from_unit: Annotated[
        Unit,
        typer.Option("--from", help="Unit of the value: metric (mm) or imperial (in)"),
    ] = Unit.METRIC,
    to_unit: Annotated[
        Unit,
        typer.Option("--to", help="Unit to convert to"),
    ] = Unit.IMPERIAL,
) -> None:
    """Convert a length between millimetres and inches."""
    if value <= 0:
        typer.echo("Error: length must be positive", err=True)
        raise typer.Exit(code=1)
    converted = convert_unit(value, from_unit, to_unit)
    decimals = DISPLAY_DECIMALS[to_unit]
    typer.echo(f"{converted:.{decimals}f}{UNIT_SUFFIX[to_unit]}")


if __name__ == "__main__":
    app()
