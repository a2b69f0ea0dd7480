"""Pytest configuration and shared fixtures for levelgen tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Any

import numpy as np
import pytest
from PIL import Image

from levelgen.application.factory import reset_factory
from levelgen.domain import (
    Color,
    ColorRule,
    LayoutConfig,
    ObjectType,
    RotationAxis,
    RotationConfig,
    Vector3,
)
from levelgen.infrastructure import PixelGrid

OPAQUE_BLACK = (0.0, 0.0, 0.0, 1.0)
OPAQUE_WHITE = (1.0, 1.0, 1.0, 1.0)
TRANSPARENT = (0.0, 0.0, 0.0, 0.0)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def wall() -> ObjectType:
    return ObjectType("wall", default_rotation=Vector3(0.0, 45.0, 0.0))


@pytest.fixture
def floor() -> ObjectType:
    return ObjectType("floor")


@pytest.fixture
def black() -> Color:
    return Color(0.0, 0.0, 0.0)


@pytest.fixture
def make_layout(wall: ObjectType) -> Callable[..., LayoutConfig]:
    """Build a LayoutConfig; defaults to a 1x1 black image with one wall rule."""

    def _make(
        image: Any = None,
        rules: Sequence[ColorRule] | None = None,
        rotation_axes: RotationAxis | None = None,
        **changes: Any,
    ) -> LayoutConfig:
        if image is None:
            image = PixelGrid.filled(1, 1, OPAQUE_BLACK)
        if rules is None:
            rules = [ColorRule.for_object(Color(0.0, 0.0, 0.0), wall)]
        if rotation_axes is not None:
            changes["rotation"] = RotationConfig(enabled=True, axes=rotation_axes)
        return LayoutConfig(image=image, rules=tuple(rules), **changes)

    return _make


# =============================================================================
# Factory isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_service_factory() -> Iterator[None]:
    """Keep the module-level service factory from leaking between tests."""
    yield
    reset_factory()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo ``--verbose`` handlers that point at a finished CliRunner stream."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# =============================================================================
# File fixtures
# =============================================================================


@pytest.fixture
def write_png(tmp_path: Path) -> Callable[..., Path]:
    """Write 8-bit RGBA rows (top row first, as viewed) to a PNG file."""

    def _write(rows: Sequence[Sequence[tuple[int, int, int, int]]], name: str = "level.png") -> Path:
        path = tmp_path / name
        Image.fromarray(np.array(rows, dtype=np.uint8)).save(path)
        return path

    return _write


@pytest.fixture
def config_data() -> dict[str, Any]:
    """A compilable configuration referencing ``level.png``."""
    return {
        "schema_version": "1.0",
        "preset_name": "Castle",
        "name": "Castle Level",
        "spacing": 2.0,
        "build_axes": "xz",
        "image": "level.png",
        "objects": {"wall": {"rotation": [0, 90, 0]}, "floor": {}},
        "rules": [
            {"color": "#000000", "object": "wall"},
            {"color": "#ffffff", "object": "floor"},
        ],
    }


@pytest.fixture
def level_files(
    tmp_path: Path, write_png: Callable[..., Path], config_data: dict[str, Any]
) -> Path:
    """A 2x2 PNG and a config file next to it; returns the config path.

    As viewed, the top row is (black, transparent) and the bottom row is
    (white, black).
    """
    write_png(
        [
            [(0, 0, 0, 255), (0, 0, 0, 0)],
            [(255, 255, 255, 255), (0, 0, 0, 255)],
        ]
    )
    config_path = tmp_path / "level.json"
    config_path.write_text(json.dumps(config_data), encoding="utf-8")
    return config_path
