"""Unit tests for the layout compiler."""

import logging

import pytest

from levelgen.domain import (
    BuildAxes,
    Color,
    ColorRule,
    ColorRuleTable,
    LayoutCompilationError,
    LayoutCompiler,
    ObjectType,
    Placement,
    RotationAxis,
    Vector3,
)
from levelgen.infrastructure import PixelGrid

BLACK = (0.0, 0.0, 0.0, 1.0)
RED = (1.0, 0.0, 0.0, 1.0)
CLEAR = (0.0, 0.0, 0.0, 0.0)


class TestColorRuleTable:
    """Tests for multi-match color lookup."""

    def test_returns_every_match_in_order(self, wall: ObjectType, floor: ObjectType) -> None:
        black = Color(0.0, 0.0, 0.0)
        rules = [
            ColorRule.for_object(black, wall),
            ColorRule.for_object(Color(1.0, 0.0, 0.0), floor),
            ColorRule.for_object(black, floor),
        ]
        table = ColorRuleTable(rules)
        assert len(table) == 3
        assert table.match(0.0, 0.0, 0.0) == [rules[0], rules[2]]
        assert table.match(0.5, 0.5, 0.5) == []

    def test_tolerance_applies(self, wall: ObjectType) -> None:
        table = ColorRuleTable([ColorRule.for_object(Color(0.5, 0.5, 0.5), wall)], tolerance=0.05)
        assert len(table.match(0.52, 0.5, 0.48)) == 1


class TestCompilerPreconditions:
    """Tests for precondition failures."""

    def test_missing_image(self, make_layout) -> None:
        config = make_layout().with_changes(image=None)
        with pytest.raises(LayoutCompilationError) as exc_info:
            LayoutCompiler().compile(config)
        assert exc_info.value.errors == ["No layout image assigned"]

    def test_unresolved_image_names_reference(self, make_layout) -> None:
        config = make_layout().with_changes(image=None, image_ref="missing.png")
        with pytest.raises(LayoutCompilationError, match="missing.png"):
            LayoutCompiler().compile(config)

    def test_no_rules(self, make_layout) -> None:
        with pytest.raises(LayoutCompilationError, match="color rule"):
            LayoutCompiler().compile(make_layout(rules=[]))

    def test_unresolved_object_type(self, make_layout) -> None:
        config = make_layout(rules=[ColorRule(Color(0.0, 0.0, 0.0), "tree")])
        with pytest.raises(LayoutCompilationError, match="'tree'"):
            LayoutCompiler().compile(config)

    def test_all_errors_reported_together(self) -> None:
        """Every failed precondition is collected before raising."""
        from levelgen.domain import LayoutConfig

        with pytest.raises(LayoutCompilationError) as exc_info:
            LayoutCompiler().compile(LayoutConfig())
        assert len(exc_info.value.errors) == 2


class TestCompilerTraversal:
    """Tests for traversal order, skipping and fan-out."""

    def test_single_pixel(self, make_layout, wall: ObjectType) -> None:
        """One opaque matching pixel gives one placement with the default rotation."""
        placements = LayoutCompiler().compile(make_layout())
        assert placements == [
            Placement(position=Vector3.zero(), rotation=wall.default_rotation, object_key="wall")
        ]

    def test_rows_then_columns(self, make_layout) -> None:
        """Placements come out y ascending, then x ascending."""
        image = PixelGrid(2, 2, [[BLACK, BLACK], [BLACK, BLACK]])
        placements = LayoutCompiler().compile(make_layout(image=image, spacing=1.0))
        assert [p.position for p in placements] == [
            Vector3(0.0, 0.0, 0.0),
            Vector3(1.0, 0.0, 0.0),
            Vector3(0.0, 1.0, 0.0),
            Vector3(1.0, 1.0, 0.0),
        ]

    def test_fully_transparent_pixels_skipped(self, make_layout) -> None:
        """Alpha exactly 0 emits nothing even when the color matches."""
        image = PixelGrid(3, 1, [[CLEAR, BLACK, CLEAR]])
        placements = LayoutCompiler().compile(make_layout(image=image))
        assert [p.position.x for p in placements] == [1.0]

    def test_all_transparent_gives_empty_list(self, make_layout) -> None:
        image = PixelGrid.filled(4, 4, CLEAR)
        assert LayoutCompiler().compile(make_layout(image=image)) == []

    def test_unmatched_colors_skipped(self, make_layout) -> None:
        image = PixelGrid(2, 1, [[RED, BLACK]])
        placements = LayoutCompiler().compile(make_layout(image=image))
        assert len(placements) == 1

    def test_shared_color_fans_out(self, make_layout, wall: ObjectType, floor: ObjectType) -> None:
        """k rules sharing a color place k co-located objects in rule order."""
        black = Color(0.0, 0.0, 0.0)
        rules = [ColorRule.for_object(black, floor), ColorRule.for_object(black, wall)]
        placements = LayoutCompiler().compile(make_layout(rules=rules))
        assert [p.object_key for p in placements] == ["floor", "wall"]
        assert placements[0].position == placements[1].position

    def test_build_axes_and_spacing(self, make_layout) -> None:
        image = PixelGrid(2, 1, [[CLEAR, BLACK]])
        placements = LayoutCompiler().compile(
            make_layout(image=image, build_axes=BuildAxes.YZ, spacing=3.0)
        )
        assert placements[0].position == Vector3(0.0, 3.0, 0.0)

    def test_tolerance_from_config(self, make_layout) -> None:
        image = PixelGrid.filled(1, 1, (0.02, 0.0, 0.0, 1.0))
        assert LayoutCompiler().compile(make_layout(image=image)) == []
        assert len(LayoutCompiler().compile(make_layout(image=image, color_tolerance=0.05))) == 1

    def test_logs_summary(self, make_layout, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="levelgen.domain.services.compiler"):
            LayoutCompiler().compile(make_layout())
        assert "1 placements" in caplog.text

    def test_compile_is_repeatable(self, make_layout) -> None:
        config = make_layout(image=PixelGrid(2, 1, [[BLACK, RED]]))
        compiler = LayoutCompiler()
        assert compiler.compile(config) == compiler.compile(config)


class TestCompilerRotation:
    """Tests for alpha-driven rotation."""

    @pytest.mark.parametrize(
        ("alpha", "angle"),
        [(1.0, 0.0), (0.85, 90.0), (0.75, 180.0), (0.6, 270.0), (0.3, 0.0)],
    )
    def test_alpha_selects_angle(self, make_layout, alpha: float, angle: float) -> None:
        image = PixelGrid.filled(1, 1, (0.0, 0.0, 0.0, alpha))
        placements = LayoutCompiler().compile(
            make_layout(image=image, rotation_axes=RotationAxis.Y)
        )
        assert placements[0].rotation == Vector3(0.0, angle, 0.0)

    def test_enabled_rotation_ignores_default(self, make_layout) -> None:
        """With rotation on and no axes, the default orientation is not used."""
        placements = LayoutCompiler().compile(make_layout(rotation_axes=RotationAxis.NONE))
        assert placements[0].rotation == Vector3.zero()

    def test_rotation_shared_across_fan_out(
        self, make_layout, wall: ObjectType, floor: ObjectType
    ) -> None:
        black = Color(0.0, 0.0, 0.0)
        image = PixelGrid.filled(1, 1, (0.0, 0.0, 0.0, 0.85))
        placements = LayoutCompiler().compile(
            make_layout(
                image=image,
                rules=[ColorRule.for_object(black, wall), ColorRule.for_object(black, floor)],
                rotation_axes=RotationAxis.X | RotationAxis.Z,
            )
        )
        assert [p.rotation for p in placements] == [Vector3(90.0, 0.0, 90.0)] * 2

    def test_disabled_rotation_uses_object_default(
        self, make_layout, wall: ObjectType, floor: ObjectType
    ) -> None:
        black = Color(0.0, 0.0, 0.0)
        image = PixelGrid.filled(1, 1, (0.0, 0.0, 0.0, 0.85))
        placements = LayoutCompiler().compile(
            make_layout(
                image=image,
                rules=[ColorRule.for_object(black, wall), ColorRule.for_object(black, floor)],
            )
        )
        assert [p.rotation for p in placements] == [wall.default_rotation, floor.default_rotation]
