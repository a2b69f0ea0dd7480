"""Unit tests for pixel to world coordinate mapping."""

import pytest

from levelgen.domain import BuildAxes, CoordinateMapper, Vector3, map_position


class TestMapPosition:
    """Tests for map_position."""

    @pytest.mark.parametrize(
        ("axes", "expected"),
        [
            (BuildAxes.XY, Vector3(3.0, 5.0, 0.0)),
            (BuildAxes.XZ, Vector3(3.0, 0.0, 5.0)),
            (BuildAxes.YZ, Vector3(0.0, 3.0, 5.0)),
        ],
    )
    def test_axis_pairs(self, axes: BuildAxes, expected: Vector3) -> None:
        assert map_position(axes, 3.0, 5.0, 1.0) == expected

    def test_spacing_multiplies(self) -> None:
        assert map_position(BuildAxes.XZ, 3.0, 5.0, 2.0) == Vector3(6.0, 0.0, 10.0)

    def test_zero_spacing_is_unit_grid(self) -> None:
        """Spacing 0 behaves like spacing 1 instead of collapsing to the origin."""
        assert map_position(BuildAxes.XY, 3.0, 5.0, 0.0) == map_position(
            BuildAxes.XY, 3.0, 5.0, 1.0
        )

    def test_negative_spacing_mirrors(self) -> None:
        assert map_position(BuildAxes.XY, 1.0, 2.0, -1.0) == Vector3(-1.0, -2.0, 0.0)

    def test_unknown_selector_maps_to_origin(self) -> None:
        assert map_position("diagonal", 3.0, 5.0, 1.0) == Vector3.zero()  # type: ignore[arg-type]

    def test_mapper_delegates(self) -> None:
        assert CoordinateMapper().map(BuildAxes.YZ, 1.0, 2.0, 3.0) == Vector3(0.0, 3.0, 6.0)
