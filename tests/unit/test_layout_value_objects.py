"""Unit tests for layout value objects."""

import math

import pytest

from levelgen.domain import (
    BuildAxes,
    Color,
    ColorRule,
    LayoutConfig,
    ObjectType,
    RotationAxis,
    RotationConfig,
    Vector3,
)


class TestVector3:
    """Tests for Vector3."""

    def test_zero(self) -> None:
        """zero() is the origin."""
        assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)

    def test_scalar_multiplication_both_sides(self) -> None:
        """Vectors scale by a scalar from either side."""
        assert Vector3(1.0, 2.0, 3.0) * 2 == Vector3(2.0, 4.0, 6.0)
        assert 2 * Vector3(1.0, 2.0, 3.0) == Vector3(2.0, 4.0, 6.0)

    def test_as_tuple(self) -> None:
        assert Vector3(1.0, 2.0, 3.0).as_tuple() == (1.0, 2.0, 3.0)


class TestRotationAxis:
    """Tests for the RotationAxis bitmask."""

    def test_bit_layout(self) -> None:
        """X, Y and Z use bits 1, 2 and 4."""
        assert RotationAxis.X.value == 1
        assert RotationAxis.Y.value == 2
        assert RotationAxis.Z.value == 4

    def test_from_names(self) -> None:
        """Axis names combine into a mask, case-insensitively."""
        assert RotationAxis.from_names(["x", "Z"]) == RotationAxis.X | RotationAxis.Z
        assert RotationAxis.from_names([]) == RotationAxis.NONE

    def test_from_names_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown rotation axis"):
            RotationAxis.from_names(["w"])

    def test_to_names_in_axis_order(self) -> None:
        """Names come back in x, y, z order regardless of how the mask was built."""
        assert (RotationAxis.Z | RotationAxis.X).to_names() == ["x", "z"]
        assert RotationAxis.NONE.to_names() == []


class TestColor:
    """Tests for Color."""

    def test_from_hex_matches_rgb255(self) -> None:
        """Hex and 8-bit constructors normalize identically."""
        assert Color.from_hex("#ff8000") == Color.from_rgb255(255, 128, 0)
        assert Color.from_hex("FF8000") == Color.from_rgb255(255, 128, 0)

    def test_to_hex_round_trip(self) -> None:
        assert Color.from_hex("#1a2b3c").to_hex() == "#1a2b3c"

    @pytest.mark.parametrize("value", ["#fff", "#gggggg", "", "#1234567"])
    def test_from_hex_rejects_malformed(self, value: str) -> None:
        with pytest.raises(ValueError, match="Invalid hex color"):
            Color.from_hex(value)

    def test_channel_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="channel 'g'"):
            Color(0.0, 1.5, 0.0)

    def test_rgb255_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color.from_rgb255(0, 256, 0)

    def test_default_match_is_exact(self) -> None:
        """Without a tolerance, a one-step difference in any channel does not match."""
        color = Color.from_rgb255(10, 20, 30)
        assert color.matches(10 / 255, 20 / 255, 30 / 255)
        assert not color.matches(11 / 255, 20 / 255, 30 / 255)

    def test_match_with_tolerance(self) -> None:
        """A tolerance accepts per-channel differences up to its value."""
        color = Color(0.5, 0.5, 0.5)
        assert color.matches(0.55, 0.45, 0.5, tolerance=0.1)
        assert not color.matches(0.65, 0.5, 0.5, tolerance=0.1)


class TestColorRule:
    """Tests for ColorRule."""

    def test_for_object_is_resolved(self, wall: ObjectType) -> None:
        rule = ColorRule.for_object(Color(0.0, 0.0, 0.0), wall)
        assert rule.object_key == "wall"
        assert rule.is_resolved

    def test_unresolved_rule_keeps_key(self) -> None:
        """A rule without an object type is kept as configured but incomplete."""
        rule = ColorRule(Color(0.0, 0.0, 0.0), "tree")
        assert not rule.is_resolved
        assert rule.object_key == "tree"

    def test_key_mismatch_rejected(self, wall: ObjectType) -> None:
        with pytest.raises(ValueError, match="does not match"):
            ColorRule(Color(0.0, 0.0, 0.0), "floor", wall)

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValueError):
            ColorRule(Color(0.0, 0.0, 0.0), "")

    def test_object_type_requires_key(self) -> None:
        with pytest.raises(ValueError):
            ObjectType("")


class TestRotationConfig:
    """Tests for RotationConfig."""

    def test_disabled_forces_empty_mask(self) -> None:
        """Axes given with rotation disabled are cleared."""
        config = RotationConfig(enabled=False, axes=RotationAxis.X | RotationAxis.Y)
        assert config.axes == RotationAxis.NONE

    def test_enabled_keeps_mask(self) -> None:
        config = RotationConfig(enabled=True, axes=RotationAxis.Y)
        assert config.axes == RotationAxis.Y


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    def test_defaults(self) -> None:
        """Defaults match a freshly opened editor."""
        config = LayoutConfig()
        assert config.name == "New Level"
        assert config.spacing == 0.0
        assert config.build_axes == BuildAxes.XY
        assert config.rotation == RotationConfig.disabled()
        assert config.image is None
        assert config.rules == ()
        assert config.color_tolerance == 0.0

    def test_rules_list_becomes_tuple(self, wall: ObjectType) -> None:
        rule = ColorRule.for_object(Color(0.0, 0.0, 0.0), wall)
        config = LayoutConfig(rules=[rule])  # type: ignore[arg-type]
        assert config.rules == (rule,)

    @pytest.mark.parametrize("spacing", [math.nan, math.inf, -math.inf])
    def test_non_finite_spacing_rejected(self, spacing: float) -> None:
        with pytest.raises(ValueError, match="finite"):
            LayoutConfig(spacing=spacing)

    def test_tolerance_range(self) -> None:
        with pytest.raises(ValueError, match="tolerance"):
            LayoutConfig(color_tolerance=1.5)

    def test_with_changes_returns_copy(self) -> None:
        config = LayoutConfig()
        changed = config.with_changes(name="Dungeon")
        assert changed.name == "Dungeon"
        assert config.name == "New Level"

    def test_is_complete(self, make_layout) -> None:
        """Complete needs an image, at least one rule and no unresolved keys."""
        assert make_layout().is_complete
        assert not LayoutConfig().is_complete
        broken = make_layout(rules=[ColorRule(Color(0.0, 0.0, 0.0), "tree")])
        assert broken.unresolved_object_keys == ["tree"]
        assert not broken.is_complete

    def test_image_not_compared(self, make_layout) -> None:
        """Equality ignores the live image handle and compares the reference."""
        a = make_layout(image_ref="a.png")
        b = a.with_changes(image=None)
        assert a == b
        assert a != a.with_changes(image_ref="b.png")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name: str) -> None:
        """The container name is required to build and to persist the layout."""
        with pytest.raises(ValueError, match="name"):
            LayoutConfig(name=name)

    def test_rules_sharing_a_key_must_agree(self, wall: ObjectType) -> None:
        """One object key maps to one object type across all rules."""
        turned = ObjectType("wall", default_rotation=Vector3(0.0, 180.0, 0.0))
        with pytest.raises(ValueError, match="disagree on object type 'wall'"):
            LayoutConfig(
                rules=(
                    ColorRule.for_object(Color(0.0, 0.0, 0.0), wall),
                    ColorRule.for_object(Color(1.0, 1.0, 1.0), turned),
                )
            )

    def test_rules_sharing_a_key_may_repeat(self, wall: ObjectType) -> None:
        config = LayoutConfig(
            rules=(
                ColorRule.for_object(Color(0.0, 0.0, 0.0), wall),
                ColorRule.for_object(Color(1.0, 1.0, 1.0), wall),
                ColorRule(Color(0.5, 0.5, 0.5), "wall"),
            )
        )
        assert len(config.rules) == 3
