"""Domain layer - core layout logic."""

from .confirmation import ConfirmationGate
from .presets import (
    PRESET_CAPACITY,
    DeleteOutcome,
    PresetIndexError,
    PresetNameError,
    PresetRegistry,
    PresetSlot,
    SaveOutcome,
    SaveResult,
)
from .services import (
    ColorRuleTable,
    CoordinateMapper,
    LayoutCompilationError,
    LayoutCompiler,
    RotationDecoder,
    alpha_to_angle,
    decode_rotation,
    map_position,
)
from .value_objects import (
    BuildAxes,
    Color,
    ColorRule,
    LayoutConfig,
    ObjectType,
    Placement,
    RotationAxis,
    RotationConfig,
    Vector3,
)

__all__ = [
    "BuildAxes",
    "Color",
    "ColorRule",
    "ColorRuleTable",
    "ConfirmationGate",
    "CoordinateMapper",
    "DeleteOutcome",
    "LayoutCompilationError",
    "LayoutCompiler",
    "LayoutConfig",
    "ObjectType",
    "PRESET_CAPACITY",
    "Placement",
    "PresetIndexError",
    "PresetNameError",
    "PresetRegistry",
    "PresetSlot",
    "RotationAxis",
    "RotationConfig",
    "RotationDecoder",
    "SaveOutcome",
    "SaveResult",
    "Vector3",
    "alpha_to_angle",
    "decode_rotation",
    "map_position",
]
