"""Application commands (use cases) for layout compilation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from levelgen.domain import LayoutCompilationError, LayoutCompiler, LayoutConfig

from .dtos import LayoutOutput

if TYPE_CHECKING:
    from levelgen.contracts.protocols import LayoutCompilerProtocol, SceneBuilder


class CompileLayoutCommand:
    """Command to compile a layout configuration and hand it to a scene builder."""

    def __init__(
        self,
        compiler: LayoutCompilerProtocol | None = None,
        scene_builder: SceneBuilder[Any] | None = None,
    ) -> None:
        self.compiler = compiler or LayoutCompiler()
        self.scene_builder = scene_builder

    def execute(self, config: LayoutConfig) -> LayoutOutput:
        """Execute the compile command.

        Args:
            config: Layout configuration with an image and color rules.

        Returns:
            LayoutOutput with the placements and built scene, or with
            ``errors`` populated (and no placements) if the configuration
            cannot be compiled.
        """
        try:
            placements = self.compiler.compile(config)
        except LayoutCompilationError as e:
            return LayoutOutput(name=config.name, errors=list(e.errors))

        scene = None
        if self.scene_builder is not None:
            scene = self.scene_builder.build(config.name, placements)

        return LayoutOutput(name=config.name, placements=placements, scene=scene)
