"""Image to placement compilation.

The compiler walks every pixel of the configured image, rows ascending and
columns ascending within a row, and turns each opaque pixel that matches
one or more color rules into placements.

Matching is multi-match: a pixel that matches k rules emits k placements at
the same position. This is how one pixel spawns a stack of co-located
objects, so it must not be "fixed" into first-match semantics.
"""

from __future__ import annotations

import logging

from ..value_objects import LayoutConfig, Placement, Vector3
from .color_rules import ColorRuleTable
from .coordinates import CoordinateMapper
from .rotation import RotationDecoder

__all__ = ["LayoutCompilationError", "LayoutCompiler", "check_preconditions"]

logger = logging.getLogger(__name__)


class LayoutCompilationError(Exception):
    """Raised when a configuration cannot be compiled.

    No partial placement list is ever produced alongside this error.

    Attributes:
        errors: Every precondition that failed.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def check_preconditions(config: LayoutConfig) -> list[str]:
    """Return the reasons a configuration cannot be compiled (empty if none)."""
    errors: list[str] = []
    if config.image is None:
        if config.image_ref:
            errors.append(f"Layout image could not be resolved: {config.image_ref}")
        else:
            errors.append("No layout image assigned")
    if not config.rules:
        errors.append("At least one color rule is required")
    for key in config.unresolved_object_keys:
        errors.append(f"Color rule references unknown object type '{key}'")
    return errors


class LayoutCompiler:
    """Compiles a layout configuration into an ordered list of placements."""

    def __init__(
        self,
        rotation_decoder: RotationDecoder | None = None,
        coordinate_mapper: CoordinateMapper | None = None,
    ) -> None:
        self.rotation_decoder = rotation_decoder or RotationDecoder()
        self.coordinate_mapper = coordinate_mapper or CoordinateMapper()

    def compile(self, config: LayoutConfig) -> list[Placement]:
        """Compile the configuration.

        Args:
            config: Layout configuration with an image and color rules.

        Returns:
            Placements in traversal order (rows ascending, columns ascending,
            then rule order within a pixel).

        Raises:
            LayoutCompilationError: If the image is missing, there are no
                rules, or a rule's object type is unresolved.
        """
        errors = check_preconditions(config)
        if errors:
            raise LayoutCompilationError(errors)

        image = config.image
        assert image is not None
        table = ColorRuleTable(config.rules, tolerance=config.color_tolerance)
        rotation_enabled = config.rotation.enabled
        axes = config.rotation.axes

        placements: list[Placement] = []
        skipped = 0
        for y in range(image.height):
            for x in range(image.width):
                r, g, b, a = image.sample(x, y)
                if a == 0:
                    skipped += 1
                    continue

                matches = table.match(r, g, b)
                if not matches:
                    continue

                pixel_rotation: Vector3 | None = None
                if rotation_enabled:
                    pixel_rotation = self.rotation_decoder.rotation_for_alpha(axes, a)
                position = self.coordinate_mapper.map(
                    config.build_axes, float(x), float(y), config.spacing
                )

                for rule in matches:
                    assert rule.object_type is not None
                    rotation = (
                        pixel_rotation
                        if pixel_rotation is not None
                        else rule.object_type.default_rotation
                    )
                    placements.append(
                        Placement(
                            position=position,
                            rotation=rotation,
                            object_key=rule.object_key,
                        )
                    )

        logger.debug(
            f"Compiled '{config.name}': {image.width}x{image.height} pixels, "
            f"{skipped} transparent, {len(placements)} placements"
        )
        return placements
