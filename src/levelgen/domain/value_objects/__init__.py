"""Value objects for the level layout domain.

This module provides immutable data types used throughout the layout
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Vectors and axis selectors
from ._geometry import (
    BuildAxes,
    RotationAxis,
    Vector3,
)

# Colors, object types and color rules
from ._color import (
    Color,
    ColorRule,
    ObjectType,
)

# Layout configuration and compiled output
from ._layout import (
    LayoutConfig,
    Placement,
    RotationConfig,
)

__all__ = [
    "BuildAxes",
    "Color",
    "ColorRule",
    "LayoutConfig",
    "ObjectType",
    "Placement",
    "RotationAxis",
    "RotationConfig",
    "Vector3",
]
