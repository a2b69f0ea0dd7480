"""Layout configuration and placement value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from ._color import ColorRule, ObjectType
from ._geometry import BuildAxes, RotationAxis, Vector3

if TYPE_CHECKING:
    from levelgen.contracts.protocols import ImageSource


@dataclass(frozen=True)
class RotationConfig:
    """Alpha-driven rotation settings.

    When ``enabled`` is False the axis mask is forced to ``RotationAxis.NONE``.
    """

    enabled: bool = False
    axes: RotationAxis = RotationAxis.NONE

    def __post_init__(self) -> None:
        if not self.enabled and self.axes != RotationAxis.NONE:
            object.__setattr__(self, "axes", RotationAxis.NONE)

    @classmethod
    def disabled(cls) -> "RotationConfig":
        return cls(enabled=False)


@dataclass(frozen=True)
class LayoutConfig:
    """Everything needed to compile one image into placements.

    This is the unit of work for the compiler and the unit of storage for
    a preset.

    Attributes:
        name: Name of the container the placements are parented under.
        spacing: Grid multiplier; 0 means a unit grid.
        build_axes: Which two spatial axes the pixel grid maps onto.
        rotation: Alpha-driven rotation settings.
        image: Live image handle, or None when missing or unresolved.
        image_ref: Path reference the image was resolved from.
        rules: Ordered color rules. Duplicate colors are allowed.
        color_tolerance: Per-channel tolerance for color matching.
    """

    name: str = "New Level"
    spacing: float = 0.0
    build_axes: BuildAxes = BuildAxes.XY
    rotation: RotationConfig = field(default_factory=RotationConfig)
    image: "ImageSource | None" = field(default=None, compare=False, repr=False)
    image_ref: str | None = None
    rules: tuple[ColorRule, ...] = ()
    color_tolerance: float = 0.0

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Layout name must not be empty")
        if not math.isfinite(self.spacing):
            raise ValueError("Spacing must be a finite number")
        if not 0.0 <= self.color_tolerance <= 1.0:
            raise ValueError("Color tolerance must be between 0 and 1")
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))

        # Persisted configs keep one catalog entry per key.
        object_types: dict[str, ObjectType] = {}
        for rule in self.rules:
            if rule.object_type is None:
                continue
            known = object_types.setdefault(rule.object_key, rule.object_type)
            if known != rule.object_type:
                raise ValueError(
                    f"Color rules disagree on object type '{rule.object_key}': "
                    f"{known.default_rotation} vs {rule.object_type.default_rotation}"
                )

    def with_changes(self, **changes: Any) -> "LayoutConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def unresolved_object_keys(self) -> list[str]:
        """Object keys of rules whose object type could not be resolved."""
        return [rule.object_key for rule in self.rules if not rule.is_resolved]

    @property
    def is_complete(self) -> bool:
        """True when the config has an image, rules, and no broken references."""
        return (
            self.image is not None
            and len(self.rules) > 0
            and not self.unresolved_object_keys
        )


@dataclass(frozen=True)
class Placement:
    """One object instance to create: where, how rotated, and what."""

    position: Vector3
    rotation: Vector3
    object_key: str
