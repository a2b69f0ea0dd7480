"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from levelgen.application.commands import CompileLayoutCommand
    from levelgen.contracts.protocols import LayoutCompilerProtocol
    from levelgen.infrastructure.exporters import ExportManager
    from levelgen.infrastructure.scene import SceneDocumentBuilder


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so tests can inject replacements
    and the CLI shares one compiler and scene builder per process.
    """

    _compiler: "LayoutCompilerProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _scene_builder: "SceneDocumentBuilder | None" = field(
        default=None, init=False, repr=False
    )

    def get_compiler(self) -> "LayoutCompilerProtocol":
        """Get or create layout compiler instance."""
        if self._compiler is None:
            from levelgen.domain.services import LayoutCompiler

            self._compiler = LayoutCompiler()
        return self._compiler

    def get_scene_builder(self) -> "SceneDocumentBuilder":
        """Get or create scene document builder instance."""
        if self._scene_builder is None:
            from levelgen.infrastructure.scene import SceneDocumentBuilder

            self._scene_builder = SceneDocumentBuilder()
        return self._scene_builder

    def create_export_manager(self, output_dir: "Path") -> "ExportManager":
        """Create an export manager writing into ``output_dir``."""
        from levelgen.infrastructure.exporters import ExportManager

        return ExportManager(output_dir)

    def create_compile_command(self) -> "CompileLayoutCommand":
        """Create CompileLayoutCommand with all dependencies."""
        from levelgen.application.commands import CompileLayoutCommand

        return CompileLayoutCommand(
            compiler=self.get_compiler(),
            scene_builder=self.get_scene_builder(),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
