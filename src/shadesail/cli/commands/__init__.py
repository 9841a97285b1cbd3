"""CLI command implementations for the shadesail application.

This package contains subcommands for the shadesail CLI, including:
- validate: Validate a configuration file
"""

from shadesail.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
