"""Shared test fixtures: a square test ward, boundary files, settings and stub collaborators."""

import json
from pathlib import Path

import pytest

from ward_checker.core.config import Settings
from ward_checker.lib.boundary_loader import BoundaryRegistry, WardBoundary
from ward_checker.lib.geocoder.base import BaseGeocoder, GeocodeCandidate
from ward_checker.lib.submission import LogOnlySubmissionSink

# Square around Hatfield, Pretoria; (lat, lng)
WARD_VERTICES = [
    [-25.740, 28.220],
    [-25.740, 28.240],
    [-25.755, 28.240],
    [-25.755, 28.220],
]
INSIDE_POINT = (-25.746, 28.231)


class StubGeocoder(BaseGeocoder):
    """Replays canned responses in call order and records every query.

    Each response is a candidate list or an exception to raise. Calls past
    the end of the script return no candidates.
    """

    def __init__(self, responses: list[list[GeocodeCandidate] | Exception] | None = None) -> None:
        self.responses = list(responses or [])
        self.queries: list[str] = []

    @property
    def provider_name(self) -> str:
        return "stub"

    async def search(self, query: str, *, limit: int = 3) -> list[GeocodeCandidate]:
        self.queries.append(query)
        if not self.responses:
            return []
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def candidate(
    point: tuple[float, float] = INSIDE_POINT,
    label: str = "Hatfield, Pretoria, Gauteng",
) -> GeocodeCandidate:
    return GeocodeCandidate(latitude=point[0], longitude=point[1], display_label=label)


@pytest.fixture
def ward_boundary() -> WardBoundary:
    return WardBoundary(ward_id="ward44", vertices=tuple(tuple(v) for v in WARD_VERTICES))


@pytest.fixture
def registry(ward_boundary: WardBoundary) -> BoundaryRegistry:
    return BoundaryRegistry([ward_boundary])


@pytest.fixture
def boundary_file(tmp_path: Path) -> Path:
    """Plain ward-boundary JSON file holding ward 44."""
    path = tmp_path / "ward_boundaries.json"
    path.write_text(json.dumps({"ward44": WARD_VERTICES}))
    return path


@pytest.fixture
def settings(boundary_file: Path) -> Settings:
    """Test application settings: no network sink, no retry delay."""
    return Settings(
        _env_file=None,
        target_ward="44",
        ward_boundaries_path=str(boundary_file),
        geocoder_retry_delay=0,
        submission_url=None,
    )


@pytest.fixture
def make_geocoder():
    """Factory for StubGeocoder instances."""

    def _make(*responses: list[GeocodeCandidate] | Exception) -> StubGeocoder:
        return StubGeocoder(list(responses))

    return _make


@pytest.fixture
def make_candidate():
    """Factory for GeocodeCandidate instances."""
    return candidate


@pytest.fixture
def sink() -> LogOnlySubmissionSink:
    return LogOnlySubmissionSink()
