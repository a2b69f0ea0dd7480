"""CLI command implementations for the levelgen application.

This package contains subcommands for the levelgen CLI, including:
- validate: Validate a configuration file
- presets: Save, load and delete named presets
"""

from levelgen.cli.commands.presets import presets_app
from levelgen.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "presets_app", "validate_command"]
