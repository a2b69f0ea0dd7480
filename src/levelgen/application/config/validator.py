"""Semantic checks on layout configurations.

Schema validation (types, ranges, formats) happens in the pydantic models.
This module adds the checks that need the whole configuration: whether it
can be compiled at all, and settings that compile but are likely mistakes.
"""

from levelgen.application.config.schemas import LayoutConfiguration, parse_color
from levelgen.application.config.results import ValidationResult
from levelgen.domain.value_objects import Color


def _check_compilable(config: LayoutConfiguration, result: ValidationResult) -> None:
    if not config.image:
        result.add_error("image", "No layout image assigned")
    if not config.rules:
        result.add_error("rules", "At least one color rule is required")
    for i, rule in enumerate(config.rules):
        if rule.object_key not in config.objects:
            result.add_error(
                f"rules[{i}].object",
                f"Unknown object type '{rule.object_key}'",
                value=rule.object_key,
            )


def _check_duplicate_colors(
    config: LayoutConfiguration, result: ValidationResult
) -> None:
    first_seen: dict[Color, int] = {}
    for i, rule in enumerate(config.rules):
        color = parse_color(rule.color)
        if color in first_seen:
            result.add_warning(
                f"rules[{i}].color",
                f"Color {color.to_hex()} is also used by rules[{first_seen[color]}]; "
                "matching pixels will place both objects at the same position",
            )
        else:
            first_seen[color] = i


def _check_rotation(config: LayoutConfiguration, result: ValidationResult) -> None:
    rotation = config.rotation
    if not rotation.enabled and rotation.axes:
        result.add_warning(
            "rotation.axes",
            "Rotation axes are ignored while rotation is disabled",
            suggestion='Set "rotation.enabled" to true or remove the axes',
        )
    if rotation.enabled and not rotation.axes:
        result.add_warning(
            "rotation.axes",
            "Rotation is enabled but no axes are selected; every rotation will be zero",
            suggestion='Add one or more of "x", "y", "z"',
        )


def validate_config(config: LayoutConfiguration) -> ValidationResult:
    """Run all semantic checks on a configuration.

    Args:
        config: A schema-valid LayoutConfiguration

    Returns:
        ValidationResult with blocking errors (nothing to compile, unknown
        object keys) and advisory warnings.
    """
    result = ValidationResult()
    _check_compilable(config, result)
    _check_duplicate_colors(config, result)
    _check_rotation(config, result)
    if config.spacing == 0:
        result.add_warning(
            "spacing",
            "Spacing 0 places objects on a unit grid",
            suggestion="Set spacing to 1 to make this explicit",
        )
    return result
