"""Exporter framework for compiled layouts.

Registered exporters:
- csv: Flat placement table (index, object_key, position, rotation)
- json: Scene document with a container and named entities

Usage:
    from levelgen.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(Path("out"))
    manager.export_all(["json", "csv"], output, project_name="level-01")
"""

from levelgen.infrastructure.exporters.base import (
    ExportManager,
    Exporter,
    ExporterRegistry,
)
from levelgen.infrastructure.exporters.placement_csv import (
    CSV_COLUMNS,
    PlacementCsvExporter,
)
from levelgen.infrastructure.exporters.scene_json import SceneJsonExporter

__all__ = [
    "CSV_COLUMNS",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "PlacementCsvExporter",
    "SceneJsonExporter",
]
