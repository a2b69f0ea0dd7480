"""Adapter between LayoutConfiguration schemas and domain LayoutConfig objects.

This module converts the pydantic configuration model into the frozen
domain ``LayoutConfig`` consumed by the compiler, and back again. The
reverse direction is what session persistence uses to store presets.

Object types are resolved from the configuration's ``objects`` catalog.
A rule whose key is missing from the catalog becomes an unresolved rule
(``object_type is None``) instead of failing the conversion, so a saved
configuration always restores even if it can no longer be compiled.
"""

from __future__ import annotations

import logging
from pathlib import Path

from levelgen.application.config.schemas import (
    ColorRuleConfig,
    LayoutConfiguration,
    ObjectTypeConfig,
    RotationSettingsConfig,
    parse_color,
)
from levelgen.contracts.protocols import AssetResolver
from levelgen.domain.value_objects import (
    ColorRule,
    LayoutConfig,
    ObjectType,
    RotationAxis,
    RotationConfig,
    Vector3,
)

logger = logging.getLogger(__name__)


def config_to_object_types(config: LayoutConfiguration) -> dict[str, ObjectType]:
    """Convert the object catalog into domain ObjectType instances."""
    return {
        key: ObjectType(key=key, default_rotation=Vector3(*entry.rotation))
        for key, entry in config.objects.items()
    }


def config_to_rotation(settings: RotationSettingsConfig) -> RotationConfig:
    """Convert rotation settings; axes are dropped when rotation is disabled."""
    axes = RotationAxis.from_names([axis.value for axis in settings.axes])
    return RotationConfig(enabled=settings.enabled, axes=axes)


def config_to_layout(
    config: LayoutConfiguration,
    resolver: AssetResolver | None = None,
) -> LayoutConfig:
    """Convert a LayoutConfiguration to a domain LayoutConfig.

    Args:
        config: A validated LayoutConfiguration instance
        resolver: Resolves the ``image`` reference to a live image. Without a
            resolver, or when resolution fails, the image is left as None and
            only the reference is kept.

    Returns:
        A LayoutConfig ready for the compiler (or for preset storage)

    Example:
        >>> config = load_config(Path("level-01.json"))
        >>> layout = config_to_layout(config, FileAssetResolver(Path(".")))
        >>> placements = LayoutCompiler().compile(layout)
    """
    object_types = config_to_object_types(config)

    rules = tuple(
        ColorRule(
            color=parse_color(rule.color),
            object_key=rule.object_key,
            object_type=object_types.get(rule.object_key),
        )
        for rule in config.rules
    )

    image = None
    if config.image and resolver is not None:
        image = resolver.resolve_image(config.image)
        if image is None:
            logger.warning(f"Could not resolve layout image '{config.image}'")

    return LayoutConfig(
        name=config.name,
        spacing=config.spacing,
        build_axes=config.build_axes,
        rotation=config_to_rotation(config.rotation),
        image=image,
        image_ref=config.image,
        rules=rules,
        color_tolerance=config.color_tolerance,
    )


def _image_reference(layout: LayoutConfig) -> str | None:
    """Path to persist for the layout image.

    Prefers the reference the image was resolved from, then the path of a
    file-backed image. An in-memory image has no path and cannot be
    re-linked later.
    """
    if layout.image_ref:
        return layout.image_ref
    if layout.image is None:
        return None
    path = getattr(layout.image, "path", None)
    if path is not None:
        return str(Path(path).resolve())
    logger.warning(
        f"Layout '{layout.name}' uses an in-memory image with no path; "
        "it will not be restored"
    )
    return None


def layout_to_config(
    layout: LayoutConfig, preset_name: str | None = None
) -> LayoutConfiguration:
    """Convert a domain LayoutConfig back to a LayoutConfiguration.

    The object catalog is rebuilt from the resolved rules. Unresolved rules
    keep their key but add no catalog entry, so they stay unresolved after
    a round trip. Colors are written as float lists to preserve them exactly.
    """
    objects: dict[str, ObjectTypeConfig] = {}
    for rule in layout.rules:
        if rule.object_type is not None and rule.object_key not in objects:
            objects[rule.object_key] = ObjectTypeConfig(
                rotation=list(rule.object_type.default_rotation.as_tuple())
            )

    return LayoutConfiguration(
        preset_name=preset_name,
        name=layout.name,
        spacing=layout.spacing,
        build_axes=layout.build_axes,
        rotation=RotationSettingsConfig(
            enabled=layout.rotation.enabled,
            axes=layout.rotation.axes.to_names(),
        ),
        image=_image_reference(layout),
        color_tolerance=layout.color_tolerance,
        objects=objects,
        rules=[
            ColorRuleConfig(color=list(rule.color.as_tuple()), object=rule.object_key)
            for rule in layout.rules
        ],
    )
