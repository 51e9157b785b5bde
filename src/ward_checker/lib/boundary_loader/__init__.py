"""Boundary loader library — reads ward boundary configuration.

Public API:
    - load_boundary_registry: Auto-detect format and build a BoundaryRegistry
    - load_boundaries: Auto-detect format and parse a boundary file
    - BoundaryRegistry: Read-only ward id -> WardBoundary mapping
    - WardBoundary: Named closed polygon of (lat, lng) vertices
    - ward_key: Canonical registry key for a ward identifier
    - read_ward_json / parse_ward_mapping: Plain ``{"ward44": [[lat, lng], ...]}`` format
    - read_ward_geojson: GeoJSON FeatureCollection reader
    - BoundaryConfigurationError / BoundaryNotFoundError: Configuration errors
"""

import json
from pathlib import Path

from ward_checker.lib.boundary_loader.geojson import read_ward_geojson
from ward_checker.lib.boundary_loader.registry import BoundaryRegistry
from ward_checker.lib.boundary_loader.types import (
    BoundaryConfigurationError,
    BoundaryNotFoundError,
    WardBoundary,
    ward_key,
)
from ward_checker.lib.boundary_loader.ward_json import parse_ward_mapping, read_ward_json


def _is_feature_collection(file_path: Path) -> bool:
    with file_path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return isinstance(data, dict) and data.get("type") == "FeatureCollection"


def load_boundaries(file_path: Path) -> list[WardBoundary]:
    """Load ward boundaries from a file with automatic format detection.

    ``.geojson`` files are read as GeoJSON. ``.json`` files are read as
    GeoJSON when they hold a FeatureCollection, otherwise as the plain ward
    mapping.

    Args:
        file_path: Path to the boundary file.

    Returns:
        List of WardBoundary objects.

    Raises:
        ValueError: If the file format is not supported.
    """
    suffix = file_path.suffix.lower()

    if suffix == ".geojson":
        return read_ward_geojson(file_path)
    if suffix == ".json":
        if _is_feature_collection(file_path):
            return read_ward_geojson(file_path)
        return read_ward_json(file_path)

    msg = f"Unsupported boundary file format: {suffix}. Supported: .json, .geojson"
    raise ValueError(msg)


def load_boundary_registry(file_path: str | Path) -> BoundaryRegistry:
    """Load a boundary file into a registry.

    Raises:
        BoundaryConfigurationError: If the file is missing, unreadable or malformed.
    """
    path = Path(file_path)
    if not path.is_file():
        msg = f"Ward boundary file not found: {path}"
        raise BoundaryConfigurationError(msg)
    try:
        return BoundaryRegistry(load_boundaries(path))
    except (OSError, ValueError) as e:
        msg = f"Invalid ward boundary file {path}: {e}"
        raise BoundaryConfigurationError(msg) from e


__all__ = [
    "BoundaryConfigurationError",
    "BoundaryNotFoundError",
    "BoundaryRegistry",
    "WardBoundary",
    "load_boundaries",
    "load_boundary_registry",
    "parse_ward_mapping",
    "read_ward_geojson",
    "read_ward_json",
    "ward_key",
]
