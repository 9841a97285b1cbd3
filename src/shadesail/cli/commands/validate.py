"""Validate command for checking shade sail configuration files.

This module provides the `validate` command that loads a JSON configuration
file, checks the measurements for feasibility and likely typos, and reports
manufacturing limits.
"""

from pathlib import Path
from typing import Annotated

import typer

from shadesail.application import assess
from shadesail.application.config import (
    ConfigError,
    config_to_policy,
    config_to_rate_table,
    config_to_shade,
    load_config,
)
from shadesail.domain.services.geometry import IssueKind, ValidationResult
from shadesail.domain.services.units import format_primary
from shadesail.domain.value_objects import Unit


def display_load_error(error: ConfigError) -> None:
    """Print why a configuration file could not be loaded."""
    typer.echo("Errors:", err=True)
    if error.error_type == "json_parse":
        typer.echo(f"  {error.path} is not valid JSON", err=True)
        for detail in error.details:
            typer.echo(
                f"    line {detail['line']}, column {detail['column']}: "
                f"{detail['message']}",
                err=True,
            )
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            shown = detail["value"]
            suffix = "" if shown is None or isinstance(shown, dict) else f" (got {shown!r})"
            typer.echo(
                f"  {detail['path'] or '(root)'}: {detail['message']}{suffix}",
                err=True,
            )
    else:
        typer.echo(f"  {error.message}", err=True)
    typer.echo()
    typer.echo("Could not load configuration.", err=True)


def _display_validation_result(result: ValidationResult, unit: Unit) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for issue in result.errors:
            typer.echo(f"  {', '.join(issue.involved_keys)}: {issue.message}", err=True)
            if issue.suggested_correction_mm is not None:
                suggestion = format_primary(issue.suggested_correction_mm, unit)
                typer.echo(f"    Suggestion: {issue.suspect_key} = {suggestion}", err=True)
        typer.echo()

    incomplete = [issue for issue in result.issues if issue.kind is IssueKind.INCOMPLETE]
    for issue in incomplete:
        typer.echo(issue.message, err=True)
        typer.echo()

    if result.advisories:
        typer.echo("Warnings:")
        for issue in result.advisories:
            typer.echo(f"  {issue.suspect_key}: {issue.message}")
            if issue.suggested_correction_mm is not None:
                suggestion = format_primary(issue.suggested_correction_mm, unit)
                typer.echo(f"    Suggestion: {issue.suspect_key} = {suggestion}")
        typer.echo()

    if result.errors or not result.complete:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.advisories)} warning(s)",
            err=True,
        )
    elif result.advisories:
        typer.echo(f"Validation passed with {len(result.advisories)} warning(s)")
    else:
        typer.echo("Validation passed. Measurements are consistent.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a shade sail configuration file.

    Checks the configuration file for:
    - JSON syntax and schema errors
    - Missing measurements
    - Triangles that cannot close (impossible measurements)
    - Suspected typos in redundant diagonals
    - Sails too large to manufacture

    Exit codes:
        0 - Measurements are valid with no warnings
        1 - Errors, or measurements missing
        2 - Valid but with suspected typos

    Example:
        shadesail validate my-sail.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    shade = config_to_shade(config)
    assessment = assess(shade, config_to_rate_table(config), config_to_policy(config))
    _display_validation_result(assessment.validation, shade.unit)

    raise typer.Exit(code=assessment.validation.exit_code)
