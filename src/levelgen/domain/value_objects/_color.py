"""Color and object-type value objects used by color rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ._geometry import Vector3

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Color:
    """An RGB color with normalized channels in [0, 1].

    Colors built from 8-bit values (``from_hex``/``from_rgb255``) divide by
    255, which is the same normalization image sources apply to pixels, so
    those colors compare exactly equal to the pixels they describe.
    """

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0.0 <= value <= 1.0:
                raise ValueError(
                    f"Color channel '{channel}' must be between 0 and 1, got {value}"
                )

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from 8-bit channel values."""
        for value in (r, g, b):
            if not 0 <= value <= 255:
                raise ValueError(f"8-bit channel value out of range: {value}")
        return cls(r / 255, g / 255, b / 255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a color from a ``#RRGGBB`` string (leading ``#`` optional)."""
        match = _HEX_PATTERN.match(value.strip())
        if match is None:
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = match.group(1)
        return cls.from_rgb255(
            int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
        )

    def to_hex(self) -> str:
        """Format as ``#rrggbb``, rounding each channel to 8 bits."""
        return "#{:02x}{:02x}{:02x}".format(
            round(self.r * 255), round(self.g * 255), round(self.b * 255)
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def matches(self, r: float, g: float, b: float, tolerance: float = 0.0) -> bool:
        """Compare against a sampled pixel color, ignoring alpha.

        With the default tolerance of 0 the comparison is exact equality
        per channel.
        """
        if tolerance == 0.0:
            return self.r == r and self.g == g and self.b == b
        return (
            abs(self.r - r) <= tolerance
            and abs(self.g - g) <= tolerance
            and abs(self.b - b) <= tolerance
        )


@dataclass(frozen=True)
class ObjectType:
    """A kind of object that can be placed, with its default orientation.

    Attributes:
        key: Opaque identifier handed to the scene builder.
        default_rotation: Euler rotation used when alpha-driven rotation
            is disabled.
    """

    key: str
    default_rotation: Vector3 = field(default_factory=Vector3.zero)

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Object type key must not be empty")


@dataclass(frozen=True)
class ColorRule:
    """Binds a pixel color to an object type.

    ``object_type`` is None when ``object_key`` could not be resolved
    (for example after restoring a preset whose catalog lost the entry).
    Such a rule keeps its key so it can be reported and re-linked later.
    """

    color: Color
    object_key: str
    object_type: ObjectType | None = None

    def __post_init__(self) -> None:
        if not self.object_key:
            raise ValueError("Color rule object key must not be empty")
        if self.object_type is not None and self.object_type.key != self.object_key:
            raise ValueError(
                f"Object type '{self.object_type.key}' does not match "
                f"rule key '{self.object_key}'"
            )

    @classmethod
    def for_object(cls, color: Color, object_type: ObjectType) -> "ColorRule":
        """Create a resolved rule for an object type."""
        return cls(color=color, object_key=object_type.key, object_type=object_type)

    @property
    def is_resolved(self) -> bool:
        return self.object_type is not None
