"""Unit tests for the plain ward-boundary JSON reader and format detection."""

import json
from pathlib import Path

import pytest

from ward_checker.lib.boundary_loader import (
    BoundaryConfigurationError,
    load_boundaries,
    load_boundary_registry,
    parse_ward_mapping,
    read_ward_json,
)

VERTICES = [[-25.74, 28.22], [-25.74, 28.24], [-25.755, 28.24], [-25.755, 28.22]]


class TestParseWardMapping:
    """Tests for parse_ward_mapping()."""

    def test_list_entries(self) -> None:
        boundaries = parse_ward_mapping({"ward44": VERTICES, "ward45": VERTICES})
        assert [b.key for b in boundaries] == ["ward44", "ward45"]
        assert boundaries[0].vertices[0] == (-25.74, 28.22)

    def test_object_entry_with_name(self) -> None:
        boundaries = parse_ward_mapping({"ward44": {"name": "Hatfield Ward", "vertices": VERTICES}})
        assert boundaries[0].name == "Hatfield Ward"

    def test_not_an_object(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            parse_ward_mapping([VERTICES])

    def test_entry_not_a_list(self) -> None:
        with pytest.raises(ValueError, match="ward44"):
            parse_ward_mapping({"ward44": "not vertices"})

    def test_malformed_vertex(self) -> None:
        with pytest.raises(ValueError, match="ward44"):
            parse_ward_mapping({"ward44": [[-25.74], [-25.74, 28.24], [-25.755, 28.24]]})


class TestReadWardJson:
    """Tests for read_ward_json()."""

    def test_reads_file(self, boundary_file: Path) -> None:
        boundaries = read_ward_json(boundary_file)
        assert len(boundaries) == 1
        assert boundaries[0].key == "ward44"
        assert len(boundaries[0].vertices) == 4


class TestLoadBoundaryRegistry:
    """Tests for load_boundaries() and load_boundary_registry()."""

    def test_loads_registry(self, boundary_file: Path) -> None:
        registry = load_boundary_registry(boundary_file)
        assert registry.require("44").name == "Ward 44"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(BoundaryConfigurationError, match="not found"):
            load_boundary_registry(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(BoundaryConfigurationError, match="Invalid ward boundary file"):
            load_boundary_registry(path)

    def test_malformed_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"ward44": [[1, 2]]}))
        with pytest.raises(BoundaryConfigurationError):
            load_boundary_registry(path)

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "wards.shp"
        path.write_bytes(b"")
        with pytest.raises(ValueError, match="Unsupported boundary file format"):
            load_boundaries(path)

    def test_feature_collection_in_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "wards.json"
        ring = [[lng, lat] for lat, lng in VERTICES] + [[VERTICES[0][1], VERTICES[0][0]]]
        path.write_text(
            json.dumps(
                {
                    "type": "FeatureCollection",
                    "features": [
                        {
                            "type": "Feature",
                            "properties": {"WARD_ID": "44"},
                            "geometry": {"type": "Polygon", "coordinates": [ring]},
                        }
                    ],
                }
            )
        )
        boundaries = load_boundaries(path)
        assert boundaries[0].key == "ward44"
