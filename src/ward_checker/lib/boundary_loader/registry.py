"""Read-only mapping from ward identifier to WardBoundary."""

from collections.abc import Iterable, Iterator, Mapping

from ward_checker.lib.boundary_loader.types import BoundaryNotFoundError, WardBoundary, ward_key


class BoundaryRegistry(Mapping[str, WardBoundary]):
    """Immutable ward boundary lookup.

    Keys are canonical ward keys (``"ward44"``); lookups accept either the
    bare identifier or the prefixed key.
    """

    def __init__(self, boundaries: Iterable[WardBoundary] = ()) -> None:
        self._boundaries: dict[str, WardBoundary] = {}
        for boundary in boundaries:
            if boundary.key in self._boundaries:
                msg = f"Duplicate boundary for ward {boundary.ward_id!r}"
                raise ValueError(msg)
            self._boundaries[boundary.key] = boundary

    def __getitem__(self, ward_id: str) -> WardBoundary:
        return self._boundaries[ward_key(ward_id)]

    def __contains__(self, ward_id: object) -> bool:
        return isinstance(ward_id, str) and ward_key(ward_id) in self._boundaries

    def __iter__(self) -> Iterator[str]:
        return iter(self._boundaries)

    def __len__(self) -> int:
        return len(self._boundaries)

    def get(self, ward_id: str, default: WardBoundary | None = None) -> WardBoundary | None:  # type: ignore[override]
        return self._boundaries.get(ward_key(ward_id), default)

    def require(self, ward_id: str) -> WardBoundary:
        """Return the ward's boundary.

        Raises:
            BoundaryNotFoundError: If the ward is not configured.
        """
        boundary = self.get(ward_id)
        if boundary is None:
            raise BoundaryNotFoundError(ward_id, sorted(self._boundaries))
        return boundary
