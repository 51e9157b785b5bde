"""Builds session collaborators from settings.

Shared by the CLI and the HTTP API so both validate configuration the same
way at startup.
"""

from loguru import logger

from ward_checker.core.config import Settings
from ward_checker.lib.boundary_loader import BoundaryRegistry, load_boundary_registry
from ward_checker.lib.geocoder import BaseGeocoder, GeocodeResolver, get_geocoder
from ward_checker.lib.submission import BaseSubmissionSink, FormSubmissionSink, LogOnlySubmissionSink
from ward_checker.services.eligibility_service import EligibilitySession
from ward_checker.services.presentation import BasePresenter


def load_registry(settings: Settings) -> BoundaryRegistry:
    """Load the boundary file and check the target ward is present.

    Raises:
        BoundaryConfigurationError: If the file is missing or malformed.
        BoundaryNotFoundError: If the target ward has no boundary.
    """
    registry = load_boundary_registry(settings.ward_boundaries_path)
    boundary = registry.require(settings.target_ward)
    logger.info(f"Target ward {settings.target_ward}: {boundary.name} ({len(boundary.vertices)} vertices)")
    return registry


def build_geocoder(settings: Settings) -> BaseGeocoder:
    return get_geocoder(
        "nominatim",
        timeout=settings.geocoder_timeout,
        email=settings.geocoder_nominatim_email,
        user_agent=settings.geocoder_user_agent,
        country_codes=settings.locality_country_code,
        base_url=settings.geocoder_nominatim_url,
    )


def build_resolver(settings: Settings, geocoder: BaseGeocoder | None = None) -> GeocodeResolver:
    return GeocodeResolver(
        geocoder or build_geocoder(settings),
        settings.locality,
        result_limit=settings.geocoder_result_limit,
        retry_delay=settings.geocoder_retry_delay,
    )


def build_submission_sink(settings: Settings, *, dry_run: bool = False) -> BaseSubmissionSink:
    """Form sink when a URL is configured, otherwise (or on dry run) the log-only sink."""
    if dry_run or not settings.submission_url:
        return LogOnlySubmissionSink(settings.submission_fields)
    return FormSubmissionSink(
        settings.submission_url,
        settings.submission_fields,
        timeout=settings.submission_timeout,
    )


def build_session(
    settings: Settings,
    registry: BoundaryRegistry,
    presenter: BasePresenter,
    *,
    resolver: GeocodeResolver | None = None,
    sink: BaseSubmissionSink | None = None,
) -> EligibilitySession:
    """Fresh session for the configured target ward."""
    return EligibilitySession(
        resolver=resolver or build_resolver(settings),
        registry=registry,
        ward_id=settings.target_ward,
        presenter=presenter,
        sink=sink or build_submission_sink(settings),
    )


def build_manual_session(
    settings: Settings,
    registry: BoundaryRegistry,
    presenter: BasePresenter,
) -> EligibilitySession:
    """Session for map-click checks only, already in manual mode.

    No geocoder or submission sink is built.
    """
    session = EligibilitySession(registry=registry, ward_id=settings.target_ward, presenter=presenter)
    session.enter_manual_mode()
    return session
