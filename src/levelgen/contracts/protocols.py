"""Service protocols for dependency injection.

This module defines protocol classes that establish contracts between layers.
The domain depends only on these protocols for its external collaborators
(image input, scene construction, preference storage and asset resolution),
so infrastructure implementations can be swapped in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from levelgen.domain.value_objects import LayoutConfig, Placement

SceneT = TypeVar("SceneT", covariant=True)


@runtime_checkable
class ImageSource(Protocol):
    """A raster addressable by integer pixel coordinates.

    Channel values returned by ``sample`` are normalized floats in [0, 1].
    Alpha must be straight (not premultiplied) transparency, and colors
    must be bit-exact; both are the caller's responsibility.

    Example:
        ```python
        class SolidImage:
            width = 2
            height = 2

            def sample(self, x: int, y: int) -> tuple[float, float, float, float]:
                return (1.0, 0.0, 0.0, 1.0)
        ```
    """

    @property
    def width(self) -> int:
        """Number of pixel columns."""
        ...

    @property
    def height(self) -> int:
        """Number of pixel rows."""
        ...

    def sample(self, x: int, y: int) -> tuple[float, float, float, float]:
        """Return ``(r, g, b, a)`` for the pixel at ``(x, y)``.

        Args:
            x: Column in ``[0, width)``.
            y: Row in ``[0, height)``.
        """
        ...


class LayoutCompilerProtocol(Protocol):
    """Protocol for compiling a layout configuration into placements."""

    def compile(self, config: LayoutConfig) -> list[Placement]:
        """Compile the configuration.

        Raises:
            LayoutCompilationError: If the configuration is incomplete.
        """
        ...


class SceneBuilder(Protocol[SceneT]):
    """Protocol for the collaborator that instantiates placements.

    Implementations create one entity per placement, all parented under a
    single container named after the layout.
    """

    def build(self, container_name: str, placements: list[Placement]) -> SceneT:
        """Instantiate placements under a container.

        Args:
            container_name: Name of the parent container.
            placements: Placements in compiler order.

        Returns:
            Whatever the builder produces (a scene document, a handle, ...).
        """
        ...


class PreferenceStore(Protocol):
    """String key-value store persisted between sessions."""

    def has_key(self, key: str) -> bool: ...

    def get_string(self, key: str, default: str | None = None) -> str | None: ...

    def set_string(self, key: str, value: str) -> None: ...

    def delete_key(self, key: str) -> None: ...


class AssetResolver(Protocol):
    """Re-links persisted path references to live assets."""

    def resolve_image(self, ref: str) -> ImageSource | None:
        """Resolve an image path reference.

        Returns:
            The loaded image, or None if the reference cannot be resolved.
        """
        ...
