"""Alpha-driven rotation decoding."""

from __future__ import annotations

from ..value_objects import RotationAxis, Vector3

__all__ = ["ALPHA_BANDS", "alpha_to_angle", "decode_rotation", "RotationDecoder"]

# (exclusive lower alpha bound, angle in degrees), most specific first.
# Each band covers (bound, previous bound]; alpha at or below the last
# bound falls through to 0 degrees.
ALPHA_BANDS: tuple[tuple[float, float], ...] = (
    (0.9, 0.0),
    (0.8, 90.0),
    (0.7, 180.0),
    (0.5, 270.0),
)


def alpha_to_angle(alpha: float) -> float:
    """Map a pixel's alpha to a base rotation angle in degrees.

    Bands are half-open on the low side::

        a > 0.9        -> 0
        0.8 < a <= 0.9 -> 90
        0.7 < a <= 0.8 -> 180
        0.5 < a <= 0.7 -> 270
        0   < a <= 0.5 -> 0
    """
    for lower_bound, angle in ALPHA_BANDS:
        if alpha > lower_bound:
            return angle
    return 0.0


def decode_rotation(axes: RotationAxis, angle: float) -> Vector3:
    """Expand an angle into an Euler vector over the selected axes.

    Every selected axis receives the full angle; unselected axes get 0.
    ``decode_rotation(X | Z, 90)`` is ``Vector3(90, 0, 90)``.
    """
    return Vector3(
        angle if RotationAxis.X in axes else 0.0,
        angle if RotationAxis.Y in axes else 0.0,
        angle if RotationAxis.Z in axes else 0.0,
    )


class RotationDecoder:
    """Computes a pixel's rotation from its alpha value."""

    def decode(self, axes: RotationAxis, angle: float) -> Vector3:
        return decode_rotation(axes, angle)

    def rotation_for_alpha(self, axes: RotationAxis, alpha: float) -> Vector3:
        """Rotation for a pixel, combining the alpha bands and the axis mask."""
        return decode_rotation(axes, alpha_to_angle(alpha))
