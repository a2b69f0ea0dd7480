"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from levelgen.domain import Placement


@dataclass
class LayoutOutput:
    """Output DTO containing the compiled layout.

    Attributes:
        name: Container name the placements are parented under.
        placements: Placements in compiler order.
        scene: Whatever the scene builder produced, or None without a builder
            or when compilation failed.
        errors: List of error messages if compilation failed.
    """

    name: str
    placements: list[Placement] = field(default_factory=list)
    scene: Any = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was compiled successfully."""
        return len(self.errors) == 0

    @property
    def placement_count(self) -> int:
        return len(self.placements)
