"""Pixel coordinate to world position mapping."""

from __future__ import annotations

import logging

from ..value_objects import BuildAxes, Vector3

__all__ = ["CoordinateMapper", "map_position"]

logger = logging.getLogger(__name__)


def map_position(build_axes: BuildAxes, x: float, y: float, spacing: float) -> Vector3:
    """Project a pixel coordinate onto two world axes.

    Args:
        build_axes: Axis pair the image plane maps onto.
        x: Pixel column.
        y: Pixel row.
        spacing: Grid multiplier. Exactly 0 means a unit grid, not a
            collapse to the origin.

    Returns:
        The world position. An unrecognized axis selector maps to the origin.
    """
    multiplier = 1.0 if spacing == 0 else spacing

    if build_axes == BuildAxes.XY:
        return Vector3(x, y, 0.0) * multiplier
    if build_axes == BuildAxes.XZ:
        return Vector3(x, 0.0, y) * multiplier
    if build_axes == BuildAxes.YZ:
        return Vector3(0.0, x, y) * multiplier

    logger.debug(f"Unrecognized build axes {build_axes!r}, mapping to origin")
    return Vector3.zero()


class CoordinateMapper:
    """Maps pixel coordinates to world positions."""

    def map(self, build_axes: BuildAxes, x: float, y: float, spacing: float) -> Vector3:
        return map_position(build_axes, x, y, spacing)
