"""Root configuration schemas.

This module contains the root LayoutConfiguration model, which represents a
complete layout configuration file, and SessionConfiguration, the persisted
editor session (current configuration plus every preset slot).
"""

import math

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from levelgen.application.config.schemas.base import (
    CURRENT_SCHEMA_VERSION,
    BuildAxesConfig,
    ColorRuleConfig,
    ObjectTypeConfig,
    RotationSettingsConfig,
    check_schema_version,
)
from levelgen.domain.presets import PRESET_CAPACITY


class LayoutConfiguration(BaseModel):
    """Root configuration model for an image-to-layout compilation.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        preset_name: Name to save this configuration under (optional)
        name: Name of the container that placements are parented under
        spacing: Grid multiplier between placements (0 means unit grid)
        build_axes: Axis pair the image maps onto ("xy", "xz" or "yz")
        rotation: Alpha-driven rotation settings
        image: Path reference to the layout image (optional until compiling)
        color_tolerance: Per-channel color tolerance, 0 for exact matching
        objects: Object type catalog keyed by object key
        rules: Ordered color rules; several rules may share a color

    Example:
        >>> config = LayoutConfiguration(
        ...     schema_version="1.0",
        ...     image="level.png",
        ...     objects={"wall": ObjectTypeConfig()},
        ...     rules=[ColorRuleConfig(color="#000000", object="wall")],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default=CURRENT_SCHEMA_VERSION, pattern=r"^\d+\.\d+$")
    preset_name: str | None = Field(default=None, description="Preset name (optional)")
    name: str = Field(default="New Level", min_length=1)
    spacing: float = 0.0
    build_axes: BuildAxesConfig = BuildAxesConfig.XY
    rotation: RotationSettingsConfig = Field(default_factory=RotationSettingsConfig)
    image: str | None = Field(default=None, description="Layout image path")
    color_tolerance: float = Field(default=0.0, ge=0.0, le=1.0)
    objects: dict[str, ObjectTypeConfig] = Field(default_factory=dict)
    rules: list[ColorRuleConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported."""
        return check_schema_version(v)

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        """Reject whitespace-only container names."""
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v

    @field_validator("spacing")
    @classmethod
    def validate_spacing_finite(cls, v: float) -> float:
        """Reject NaN and infinite spacing."""
        if not math.isfinite(v):
            raise ValueError("Spacing must be a finite number")
        return v

    @field_validator("objects")
    @classmethod
    def validate_object_keys(
        cls, v: dict[str, ObjectTypeConfig]
    ) -> dict[str, ObjectTypeConfig]:
        """Ensure object keys are non-empty."""
        for key in v:
            if not key.strip():
                raise ValueError("Object keys must not be empty")
        return v


class PresetSlotConfig(BaseModel):
    """Persisted preset slot.

    Attributes:
        index: Slot index
        occupied: Whether the slot holds a configuration
        name: Preset name (empty for empty slots)
        config: Stored configuration (None for empty slots)
    """

    model_config = ConfigDict(extra="forbid")

    index: int = Field(..., ge=0)
    occupied: bool = False
    name: str = ""
    config: LayoutConfiguration | None = None

    @model_validator(mode="after")
    def validate_occupancy(self) -> "PresetSlotConfig":
        """Occupied slots need a name and a config; empty slots need neither."""
        if self.occupied and (self.config is None or not self.name):
            raise ValueError("Occupied preset slots require a name and a config")
        if not self.occupied and (self.config is not None or self.name):
            raise ValueError("Empty preset slots cannot hold a name or config")
        return self


class SessionConfiguration(BaseModel):
    """Persisted editor session.

    Attributes:
        schema_version: Version string in format "major.minor"
        preset_name: Contents of the preset name field
        selected_index: Currently selected preset slot
        config: In-progress layout configuration
        presets: Preset slots in index order
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default=CURRENT_SCHEMA_VERSION, pattern=r"^\d+\.\d+$")
    preset_name: str = "Preset 001"
    selected_index: int = Field(default=0, ge=0, lt=PRESET_CAPACITY)
    config: LayoutConfiguration = Field(default_factory=LayoutConfiguration)
    presets: list[PresetSlotConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported."""
        return check_schema_version(v)

    @model_validator(mode="after")
    def validate_slot_order(self) -> "SessionConfiguration":
        """Slots must be listed in index order starting at 0."""
        for position, slot in enumerate(self.presets):
            if slot.index != position:
                raise ValueError(
                    f"Preset slot at position {position} has index {slot.index}"
                )
        return self
