"""Point-in-polygon membership using the even-odd ray-casting rule.

Coordinates are (latitude, longitude) pairs. Latitude is the test axis: for
every edge that straddles the point's latitude, the edge's longitude at that
latitude is interpolated and the parity flips when the point lies west of it.
Horizontal edges never straddle (strict comparison), so the interpolation
never divides by zero.
"""

from collections.abc import Sequence

from loguru import logger

Coordinate = tuple[float, float]


def is_point_in_polygon(point: Sequence[float] | None, polygon: Sequence[Sequence[float]] | None) -> bool:
    """Test whether a point lies inside an implicitly closed polygon.

    An absent point or an empty polygon is reported as outside (False)
    rather than raising; the condition is logged as a warning.

    Args:
        point: (latitude, longitude).
        polygon: Ordered (latitude, longitude) vertices; the last vertex
            connects back to the first.

    Returns:
        True if the point is inside under the even-odd rule.
    """
    if not point or not polygon:
        logger.warning(f"Invalid point or polygon data: point={point!r}, vertices={len(polygon or [])}")
        return False

    lat, lng = point[0], point[1]
    inside = False

    j = len(polygon) - 1
    for i in range(len(polygon)):
        lat_i, lng_i = polygon[i][0], polygon[i][1]
        lat_j, lng_j = polygon[j][0], polygon[j][1]

        if ((lat_i > lat) != (lat_j > lat)) and (lng < (lng_j - lng_i) * (lat - lat_i) / (lat_j - lat_i) + lng_i):
            inside = not inside

        j = i

    return inside


def polygon_bounds(polygon: Sequence[Sequence[float]]) -> tuple[Coordinate, Coordinate]:
    """Return ((min_lat, min_lng), (max_lat, max_lng)) for a non-empty polygon."""
    if not polygon:
        msg = "Cannot compute bounds of an empty polygon"
        raise ValueError(msg)
    lats = [v[0] for v in polygon]
    lngs = [v[1] for v in polygon]
    return (min(lats), min(lngs)), (max(lats), max(lngs))


def polygon_center(polygon: Sequence[Sequence[float]]) -> Coordinate:
    """Midpoint of the polygon's bounding box (used to centre a map view)."""
    (min_lat, min_lng), (max_lat, max_lng) = polygon_bounds(polygon)
    return ((min_lat + max_lat) / 2, (min_lng + max_lng) / 2)
