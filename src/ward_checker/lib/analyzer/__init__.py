"""Analyzer library — public API for ward membership checks.

Provides the even-odd point-in-polygon test, bounding-box helpers and the
tri-state eligibility classification used for resolved or clicked
coordinates.
"""

from ward_checker.lib.analyzer.eligibility import EligibilityResult, classify_point
from ward_checker.lib.analyzer.polygon import Coordinate, is_point_in_polygon, polygon_bounds, polygon_center

__all__ = [
    "Coordinate",
    "EligibilityResult",
    "classify_point",
    "is_point_in_polygon",
    "polygon_bounds",
    "polygon_center",
]
