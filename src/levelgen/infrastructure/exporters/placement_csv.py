"""CSV exporter: one row per placement."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from levelgen.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from levelgen.application.dtos import LayoutOutput

CSV_COLUMNS = ["index", "object_key", "px", "py", "pz", "rx", "ry", "rz"]


@ExporterRegistry.register("csv")
class PlacementCsvExporter:
    """Flat placement table in compiler order."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export_string(self, output: LayoutOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        for i, placement in enumerate(output.placements):
            writer.writerow(
                [i, placement.object_key]
                + list(placement.position.as_tuple())
                + list(placement.rotation.as_tuple())
            )
        return buffer.getvalue()

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8", newline="")
