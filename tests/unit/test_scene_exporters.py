"""Unit tests for the scene document builder and exporters."""

import csv
import io
import json
from pathlib import Path

import pytest

from levelgen.application import LayoutOutput
from levelgen.domain import Placement, Vector3
from levelgen.infrastructure import ExporterRegistry, ExportManager, SceneDocumentBuilder
from levelgen.infrastructure.exporters import CSV_COLUMNS, PlacementCsvExporter, SceneJsonExporter


@pytest.fixture
def placements() -> list[Placement]:
    return [
        Placement(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 90.0, 0.0), "wall"),
        Placement(Vector3(0.0, 0.0, 0.0), Vector3.zero(), "floor"),
        Placement(Vector3(2.0, 0.0, 0.0), Vector3(0.0, 90.0, 0.0), "wall"),
    ]


@pytest.fixture
def output(placements: list[Placement]) -> LayoutOutput:
    return LayoutOutput(name="Castle", placements=placements)


class TestSceneDocumentBuilder:
    """Tests for SceneDocumentBuilder."""

    def test_entities_named_per_object_key(self, placements: list[Placement]) -> None:
        document = SceneDocumentBuilder().build("Castle", placements)
        assert document.container == "Castle"
        assert [e.name for e in document.entities] == ["wall_0", "floor_0", "wall_1"]
        assert len(document) == 3

    def test_to_dict(self, placements: list[Placement]) -> None:
        data = SceneDocumentBuilder().build("Castle", placements).to_dict()
        assert data["entity_count"] == 3
        assert data["entities"][2] == {
            "name": "wall_1",
            "object": "wall",
            "position": [2.0, 0.0, 0.0],
            "rotation": [0.0, 90.0, 0.0],
        }

    def test_empty(self) -> None:
        assert SceneDocumentBuilder().build("Empty", []).to_dict()["entities"] == []


class TestExporterRegistry:
    """Tests for exporter registration."""

    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["csv", "json"]
        assert ExporterRegistry.get("json") is SceneJsonExporter
        assert ExporterRegistry.is_registered("csv")

    def test_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="Available formats: csv, json"):
            ExporterRegistry.get("fbx")


class TestExporters:
    """Tests for the json and csv exporters."""

    def test_json_builds_document_when_missing(self, output: LayoutOutput) -> None:
        data = json.loads(SceneJsonExporter().export_string(output))
        assert data["container"] == "Castle"
        assert [e["name"] for e in data["entities"]] == ["wall_0", "floor_0", "wall_1"]

    def test_json_uses_existing_document(self, output: LayoutOutput) -> None:
        output.scene = SceneDocumentBuilder().build("Prebuilt", output.placements)
        assert json.loads(SceneJsonExporter().export_string(output))["container"] == "Prebuilt"

    def test_csv_rows(self, output: LayoutOutput) -> None:
        rows = list(csv.reader(io.StringIO(PlacementCsvExporter().export_string(output))))
        assert rows[0] == CSV_COLUMNS
        assert rows[3] == ["2", "wall", "2.0", "0.0", "0.0", "0.0", "90.0", "0.0"]
        assert len(rows) == 4


class TestExportManager:
    """Tests for ExportManager file naming."""

    def test_export_all(self, output: LayoutOutput, tmp_path: Path) -> None:
        results = ExportManager(tmp_path / "out").export_all(["json", "csv"], output, "level-01")
        assert results["json"] == tmp_path / "out" / "level-01_json.json"
        assert results["csv"] == tmp_path / "out" / "level-01_csv.csv"
        assert all(path.exists() for path in results.values())

    def test_export_single(self, output: LayoutOutput, tmp_path: Path) -> None:
        path = ExportManager(tmp_path).export_single("csv", output)
        assert path.name == "level_csv.csv"
        assert path.read_text().startswith("index,object_key")
