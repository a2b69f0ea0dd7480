"""Configuration file loader with comprehensive error handling.

This module provides functionality to load and parse JSON configuration files
for layout compilation. It handles file system errors, JSON parsing errors,
and Pydantic validation errors with clear, actionable error messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from levelgen.application.config.schemas import (
    LayoutConfiguration,
    SessionConfiguration,
)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation, session)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("rotation", "axes"))
        'rotation.axes'
        >>> _format_json_path(("rules", 0, "color"))
        'rules[0].color'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error_type from a ValidationError."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(
    details: list[dict[str, Any]], heading: str = "Configuration validation failed:"
) -> str:
    """Format validation error details into a human-readable message."""
    lines = [heading]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _validate(
    model: type[BaseModel],
    data: Any,
    path: Path | None = None,
    error_type: str = "validation",
) -> Any:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        heading = (
            "Saved session is invalid:"
            if error_type == "session"
            else "Configuration validation failed:"
        )
        raise ConfigError(
            message=_format_validation_error_message(details, heading),
            error_type=error_type,
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> LayoutConfiguration:
    """Load and validate a layout configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated LayoutConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> from pathlib import Path
        >>> try:
        ...     config = load_config(Path("level-01.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    return _validate(LayoutConfiguration, data, path=path)


def load_config_from_dict(data: dict[str, Any]) -> LayoutConfiguration:
    """Load and validate a layout configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(LayoutConfiguration, data)


def load_session_from_json(blob: str) -> SessionConfiguration:
    """Parse a persisted session blob.

    Raises:
        ConfigError: With error_type "session" if the blob is not valid JSON
            or does not match the session schema.
    """
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Saved session is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="session",
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )
    return _validate(SessionConfiguration, data, error_type="session")
