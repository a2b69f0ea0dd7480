"""Spatial value objects: vectors, build axes and rotation axes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector used for positions and Euler rotations (degrees)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        """The origin / identity rotation."""
        return cls(0.0, 0.0, 0.0)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def as_tuple(self) -> tuple[float, float, float]:
        """Return the components as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)


class BuildAxes(str, Enum):
    """The two spatial axes a pixel's (x, y) coordinate is projected onto."""

    XY = "xy"
    XZ = "xz"
    YZ = "yz"


class RotationAxis(Flag):
    """Bitmask over the three rotation axes.

    The bit layout is X=1, Y=2, Z=4 so a mask can be decoded bit by bit
    into the x, y and z components of an Euler rotation.
    """

    NONE = 0
    X = 1
    Y = 2
    Z = 4

    @classmethod
    def from_names(cls, names: list[str] | tuple[str, ...]) -> "RotationAxis":
        """Build a mask from axis names such as ``["x", "z"]``."""
        mask = cls.NONE
        for name in names:
            try:
                mask |= cls[name.upper()]
            except KeyError:
                raise ValueError(f"Unknown rotation axis: {name!r}") from None
        return mask

    def to_names(self) -> list[str]:
        """Return the set axes as lowercase names, in x, y, z order."""
        return [
            axis.name.lower()
            for axis in (RotationAxis.X, RotationAxis.Y, RotationAxis.Z)
            if axis in self
        ]
