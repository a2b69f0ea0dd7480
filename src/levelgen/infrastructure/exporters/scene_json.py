"""JSON exporter for scene documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from levelgen.infrastructure.exporters.base import ExporterRegistry
from levelgen.infrastructure.scene import SceneDocument, SceneDocumentBuilder

if TYPE_CHECKING:
    from levelgen.application.dtos import LayoutOutput


@ExporterRegistry.register("json")
class SceneJsonExporter:
    """Exports the scene document (container plus named entities) as JSON.

    If the output carries no SceneDocument (it was compiled without a
    scene builder) one is built from the placements.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def _document(self, output: LayoutOutput) -> SceneDocument:
        if isinstance(output.scene, SceneDocument):
            return output.scene
        return SceneDocumentBuilder().build(output.name, output.placements)

    def export_string(self, output: LayoutOutput) -> str:
        return json.dumps(self._document(output).to_dict(), indent=self.indent)

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
