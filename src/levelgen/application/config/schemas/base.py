"""Base enums and shared models for layout configuration schemas.

This module contains the enums, version constants and small shared models
used across the schema modules. Domain enums are imported directly so the
configuration and the domain agree on values.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from levelgen.domain.value_objects import BuildAxes, Color

# Supported schema versions for configuration files
# Version 1.0: Initial schema (rules, object catalog, rotation, presets)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

CURRENT_SCHEMA_VERSION = "1.0"

BuildAxesConfig = BuildAxes


class AxisName(str, Enum):
    """Rotation axis names accepted in configuration files."""

    X = "x"
    Y = "y"
    Z = "z"


def check_schema_version(v: str) -> str:
    """Validate that a schema version is supported.

    Newer minor versions within a supported major version are accepted for
    forward compatibility (e.g., 1.3 is accepted if major version 1 is
    supported).
    """
    if v in SUPPORTED_VERSIONS:
        return v

    major_version = int(v.split(".")[0])
    supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
    if major_version in supported_majors:
        return v

    raise ValueError(
        f"Unsupported schema version '{v}'. "
        f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
    )


def parse_color(value: str | list[float]) -> Color:
    """Convert a configured color (hex string or [r, g, b] floats) to a Color."""
    if isinstance(value, str):
        return Color.from_hex(value)
    return Color(*value)


class ObjectTypeConfig(BaseModel):
    """Catalog entry for a placeable object type.

    Attributes:
        rotation: Default orientation used when alpha rotation is disabled.
        description: Optional free-form note.
    """

    model_config = ConfigDict(extra="forbid")

    rotation: list[float] = Field(
        default_factory=lambda: [0.0, 0.0, 0.0], min_length=3, max_length=3
    )
    description: str | None = None


class ColorRuleConfig(BaseModel):
    """Binding from a pixel color to an object catalog key.

    Attributes:
        color: ``"#RRGGBB"`` or ``[r, g, b]`` with channels in [0, 1]
        object: Key of an entry in the object catalog
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    color: str | list[float]
    object_key: str = Field(..., alias="object", min_length=1)

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | list[float]) -> str | list[float]:
        """Ensure the color parses as hex or as three channels in [0, 1]."""
        if isinstance(v, list) and len(v) != 3:
            raise ValueError("Color list must have exactly 3 channels [r, g, b]")
        parse_color(v)
        return v


class RotationSettingsConfig(BaseModel):
    """Alpha-driven rotation settings.

    Attributes:
        enabled: Read alpha to pick each placement's rotation
        axes: Axes that receive the decoded angle
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    axes: list[AxisName] = Field(default_factory=list, max_length=3)

    @field_validator("axes")
    @classmethod
    def validate_unique_axes(cls, v: list[AxisName]) -> list[AxisName]:
        """Reject repeated axis names."""
        if len(set(v)) != len(v):
            raise ValueError("Rotation axes must not repeat")
        return v
