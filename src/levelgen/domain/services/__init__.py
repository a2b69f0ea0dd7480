"""Domain services for layout compilation."""

from .color_rules import ColorRuleTable
from .compiler import LayoutCompilationError, LayoutCompiler, check_preconditions
from .coordinates import CoordinateMapper, map_position
from .rotation import ALPHA_BANDS, RotationDecoder, alpha_to_angle, decode_rotation

__all__ = [
    "ALPHA_BANDS",
    "ColorRuleTable",
    "CoordinateMapper",
    "LayoutCompilationError",
    "LayoutCompiler",
    "RotationDecoder",
    "alpha_to_angle",
    "check_preconditions",
    "decode_rotation",
    "map_position",
]
