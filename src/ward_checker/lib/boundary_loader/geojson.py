"""GeoJSON reader — parses ward polygons out of a FeatureCollection."""

import json
from pathlib import Path

from loguru import logger
from shapely.errors import ShapelyError
from shapely.geometry import MultiPolygon, Polygon, shape

from ward_checker.lib.boundary_loader.types import WardBoundary

_WARD_ID_PROPERTIES = ("WARD_ID", "WARD", "WardID", "ward_id", "ward", "id", "ID")
_NAME_PROPERTIES = ("NAME", "name", "WARD_NAME")


def _exterior_vertices(polygon: Polygon) -> tuple[tuple[float, float], ...]:
    """Exterior ring as (lat, lng) vertices without the closing duplicate."""
    coords = list(polygon.exterior.coords)
    if len(coords) > 1 and coords[0] == coords[-1]:
        coords = coords[:-1]
    return tuple((float(y), float(x)) for x, y, *_ in coords)


def read_ward_geojson(file_path: Path) -> list[WardBoundary]:
    """Read a GeoJSON FeatureCollection of ward polygons.

    GeoJSON positions are (longitude, latitude) and are swapped. Holes are
    dropped, and for a MultiPolygon the largest part is used.

    Args:
        file_path: Path to .geojson file.

    Returns:
        List of WardBoundary objects.

    Raises:
        ValueError: If the file cannot be parsed or has no usable features.
    """
    logger.info(f"Reading GeoJSON: {file_path}")

    with file_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        kind = data.get("type") if isinstance(data, dict) else type(data).__name__
        msg = f"Expected FeatureCollection, got {kind}"
        raise ValueError(msg)

    features = data.get("features") or []
    if not isinstance(features, list) or not features:
        msg = f"GeoJSON has no features: {file_path}"
        raise ValueError(msg)

    boundaries: list[WardBoundary] = []

    for i, feature in enumerate(features):
        if not isinstance(feature, dict):
            msg = f"Feature {i} is not a JSON object"
            raise ValueError(msg)
        geom_data = feature.get("geometry")
        if not geom_data:
            continue

        try:
            geom = shape(geom_data)
            if not geom.is_valid:
                logger.warning(f"Feature {i} has invalid geometry, attempting repair")
                geom = geom.buffer(0)
        except (ShapelyError, AttributeError, IndexError, KeyError, TypeError) as e:
            msg = f"Feature {i} has unreadable geometry: {e}"
            raise ValueError(msg) from e

        if isinstance(geom, MultiPolygon):
            geom = max(geom.geoms, key=lambda part: part.area)
        if not isinstance(geom, Polygon):
            logger.warning(f"Skipping unsupported geometry type: {geom.geom_type}")
            continue

        props = feature.get("properties")
        if not isinstance(props, dict):
            props = {}
        ward_id = next((props[k] for k in _WARD_ID_PROPERTIES if props.get(k) not in (None, "")), i + 1)
        name = next((props[k] for k in _NAME_PROPERTIES if props.get(k)), "")

        boundaries.append(WardBoundary(ward_id=str(ward_id), vertices=_exterior_vertices(geom), name=str(name)))

    if not boundaries:
        msg = f"GeoJSON has no usable ward polygons: {file_path}"
        raise ValueError(msg)

    logger.info(f"Parsed {len(boundaries)} ward boundaries from GeoJSON")
    return boundaries
