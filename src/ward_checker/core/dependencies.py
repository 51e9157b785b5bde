"""FastAPI dependency injection for settings and session collaborators.

Each dependency can be replaced with ``app.dependency_overrides`` so tests
run without a boundary file, a geocoding provider or a submission endpoint.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ward_checker.core.config import Settings, get_settings
from ward_checker.lib.boundary_loader import BoundaryRegistry
from ward_checker.lib.geocoder import GeocodeResolver
from ward_checker.lib.submission import BaseSubmissionSink
from ward_checker.services.session_factory import build_resolver, build_submission_sink, load_registry


@lru_cache(maxsize=1)
def _cached_settings() -> Settings:
    return get_settings()


def get_app_settings() -> Settings:
    """Process-wide settings, read once."""
    return _cached_settings()


_registry_cache: dict[tuple[str, str], BoundaryRegistry] = {}


def get_boundary_registry(settings: Annotated[Settings, Depends(get_app_settings)]) -> BoundaryRegistry:
    """Read-only boundary configuration, loaded once per file and ward."""
    key = (settings.ward_boundaries_path, settings.target_ward)
    if key not in _registry_cache:
        _registry_cache[key] = load_registry(settings)
    return _registry_cache[key]


def get_resolver(settings: Annotated[Settings, Depends(get_app_settings)]) -> GeocodeResolver:
    return build_resolver(settings)


def get_submission_sink(settings: Annotated[Settings, Depends(get_app_settings)]) -> BaseSubmissionSink:
    return build_submission_sink(settings)
