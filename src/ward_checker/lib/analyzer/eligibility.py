"""Tri-state eligibility classification of a coordinate against a ward."""

from collections.abc import Sequence
from enum import StrEnum

from loguru import logger

from ward_checker.lib.analyzer.polygon import is_point_in_polygon


class EligibilityResult(StrEnum):
    """Outcome of classifying a location against the target ward."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    UNDETERMINED = "undetermined"

    @property
    def is_eligible(self) -> bool | None:
        """True/False for a decided result, None when undetermined."""
        if self is EligibilityResult.UNDETERMINED:
            return None
        return self is EligibilityResult.INSIDE


def classify_point(
    point: Sequence[float] | None,
    vertices: Sequence[Sequence[float]] | None,
    *,
    ward_id: str = "",
) -> EligibilityResult:
    """Classify a point against ward vertices.

    Args:
        point: (latitude, longitude), or None when nothing was resolved.
        vertices: Ward polygon, or None when the ward has no boundary.
        ward_id: Used for logging only.

    Returns:
        UNDETERMINED if there is no point or no boundary, else INSIDE/OUTSIDE.
    """
    if vertices is None:
        logger.error(f"No boundaries found for ward {ward_id}")
        return EligibilityResult.UNDETERMINED
    if point is None:
        return EligibilityResult.UNDETERMINED

    inside = is_point_in_polygon(point, vertices)
    logger.debug(f"Point-in-polygon result for ward {ward_id}: {inside}")
    return EligibilityResult.INSIDE if inside else EligibilityResult.OUTSIDE
