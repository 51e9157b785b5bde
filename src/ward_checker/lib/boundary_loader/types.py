"""Ward boundary value type and boundary configuration errors."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from ward_checker.lib.analyzer.polygon import Coordinate, polygon_bounds, polygon_center

MIN_VERTICES = 3

_WARD_KEY_PREFIX = re.compile(r"^ward[\s_-]*", re.IGNORECASE)


class BoundaryConfigurationError(Exception):
    """Boundary configuration is missing, unreadable or malformed."""


class BoundaryNotFoundError(BoundaryConfigurationError):
    """The requested ward has no boundary in the configuration.

    Args:
        ward_id: The ward identifier that was requested.
        available: Ward keys that are configured.
    """

    def __init__(self, ward_id: str, available: Sequence[str] = ()) -> None:
        self.ward_id = ward_id
        self.available = list(available)
        listed = ", ".join(self.available) or "none"
        super().__init__(f"No boundary configured for ward {ward_id!r} (available: {listed})")


def ward_key(ward_id: str) -> str:
    """Canonical registry key for a ward identifier: ``"44"`` and ``"Ward 44"`` -> ``"ward44"``."""
    bare = _WARD_KEY_PREFIX.sub("", str(ward_id).strip())
    return f"ward{bare.lower()}"


@dataclass(frozen=True)
class WardBoundary:
    """A named, implicitly closed ward polygon of (latitude, longitude) vertices."""

    ward_id: str
    vertices: tuple[Coordinate, ...]
    name: str = ""

    def __post_init__(self) -> None:
        vertices = tuple((float(v[0]), float(v[1])) for v in self.vertices)
        if len(vertices) < MIN_VERTICES:
            msg = f"Ward {self.ward_id!r} boundary needs at least {MIN_VERTICES} vertices, got {len(vertices)}"
            raise ValueError(msg)
        object.__setattr__(self, "vertices", vertices)
        if not self.name:
            object.__setattr__(self, "name", f"Ward {_WARD_KEY_PREFIX.sub('', self.ward_id)}")

    @property
    def key(self) -> str:
        return ward_key(self.ward_id)

    @property
    def center(self) -> Coordinate:
        return polygon_center(self.vertices)

    @property
    def bounds(self) -> tuple[Coordinate, Coordinate]:
        return polygon_bounds(self.vertices)
