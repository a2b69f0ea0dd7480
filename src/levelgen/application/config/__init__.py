"""Configuration schema and loading system for layout specifications.

This package provides JSON-based configuration loading and validation
for image-to-layout compilation. It includes Pydantic models for schema
validation, a configuration loader with comprehensive error handling,
semantic checks, and conversion to and from domain objects.

Public API:
    - LayoutConfiguration: Root configuration model
    - SessionConfiguration: Persisted editor session model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Perform semantic configuration validation
    - config_to_layout / layout_to_config: Convert to and from LayoutConfig

Example:
    >>> from pathlib import Path
    >>> from levelgen.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("level-01.json"))
    ...     print(f"{len(config.rules)} rules for image {config.image}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from levelgen.application.config.adapter import (
    config_to_layout,
    config_to_object_types,
    config_to_rotation,
    layout_to_config,
)
from levelgen.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_session_from_json,
)
from levelgen.application.config.schemas import (
    CURRENT_SCHEMA_VERSION,
    SUPPORTED_VERSIONS,
    AxisName,
    BuildAxesConfig,
    ColorRuleConfig,
    LayoutConfiguration,
    ObjectTypeConfig,
    PresetSlotConfig,
    RotationSettingsConfig,
    SessionConfiguration,
    parse_color,
)
from levelgen.application.config.validator import validate_config
from levelgen.application.config.results import (
    Severity,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "AxisName",
    "BuildAxesConfig",
    "CURRENT_SCHEMA_VERSION",
    "ColorRuleConfig",
    "ConfigError",
    "LayoutConfiguration",
    "ObjectTypeConfig",
    "PresetSlotConfig",
    "RotationSettingsConfig",
    "SUPPORTED_VERSIONS",
    "SessionConfiguration",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "config_to_layout",
    "config_to_object_types",
    "config_to_rotation",
    "layout_to_config",
    "load_config",
    "load_config_from_dict",
    "load_session_from_json",
    "parse_color",
    "validate_config",
]
