"""Reader for the plain ward-boundary JSON format.

The file is an object mapping ward keys to vertex lists::

    {"ward44": [[-25.74, 28.22], [-25.74, 28.25], [-25.76, 28.25]]}

Vertices are (latitude, longitude). A ward may instead be given as an
object with ``name`` and ``vertices`` keys.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from ward_checker.lib.boundary_loader.types import WardBoundary


def parse_ward_mapping(data: Any) -> list[WardBoundary]:
    """Build WardBoundary objects from an already-decoded mapping.

    Raises:
        ValueError: If the mapping or any entry is malformed.
    """
    if not isinstance(data, dict):
        msg = f"Expected a JSON object of ward boundaries, got {type(data).__name__}"
        raise ValueError(msg)

    boundaries: list[WardBoundary] = []
    for key, entry in data.items():
        name = ""
        vertices = entry
        if isinstance(entry, dict):
            name = str(entry.get("name") or "")
            vertices = entry.get("vertices")
        if not isinstance(vertices, list):
            msg = f"Ward {key!r}: expected a list of [lat, lng] vertices"
            raise ValueError(msg)
        try:
            boundaries.append(WardBoundary(ward_id=str(key), vertices=tuple(vertices), name=name))
        except (TypeError, IndexError) as e:
            msg = f"Ward {key!r}: malformed vertex ({e})"
            raise ValueError(msg) from e
    return boundaries


def read_ward_json(file_path: Path) -> list[WardBoundary]:
    """Read a plain ward-boundary JSON file.

    Args:
        file_path: Path to the .json file.

    Returns:
        List of WardBoundary objects.

    Raises:
        ValueError: If the file cannot be parsed or has malformed entries.
    """
    logger.info(f"Reading ward boundaries: {file_path}")

    with file_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    boundaries = parse_ward_mapping(data)
    logger.info(f"Parsed {len(boundaries)} ward boundaries")
    return boundaries
