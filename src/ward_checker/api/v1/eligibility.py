"""Eligibility API endpoints: ward overlay, automatic address check and map-click probe."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ward_checker.core.config import Settings
from ward_checker.core.dependencies import (
    get_app_settings,
    get_boundary_registry,
    get_resolver,
    get_submission_sink,
)
from ward_checker.lib.boundary_loader import BoundaryRegistry
from ward_checker.lib.geocoder import GeocodeResolver
from ward_checker.lib.submission import BaseSubmissionSink, SubmissionError
from ward_checker.schemas.eligibility import (
    AddressInput,
    EligibilityCheckResponse,
    InputValidationError,
    LocationResponse,
    ManualProbeRequest,
    ManualProbeResponse,
    StatusEntry,
    WardResponse,
)
from ward_checker.services.eligibility_service import AutomaticOutcome, EligibilitySession, SessionBusyError
from ward_checker.services.presentation import RecordingPresenter
from ward_checker.services.session_factory import build_manual_session

eligibility_router = APIRouter(prefix="/eligibility", tags=["eligibility"])

SettingsDep = Annotated[Settings, Depends(get_app_settings)]
RegistryDep = Annotated[BoundaryRegistry, Depends(get_boundary_registry)]


def _check_response(
    outcome: AutomaticOutcome,
    ward_id: str,
    presenter: RecordingPresenter,
) -> EligibilityCheckResponse:
    location = None
    if outcome.location is not None:
        location = LocationResponse(
            latitude=outcome.location.latitude,
            longitude=outcome.location.longitude,
            display_label=outcome.location.display_label,
            query=outcome.location.query,
            attempt=outcome.location.attempt,
        )
    return EligibilityCheckResponse(
        ward_id=ward_id,
        eligibility=outcome.eligibility,
        location=location,
        gps_pin=outcome.gps_pin,
        submitted=outcome.submitted,
        submission_error=outcome.submission_error,
        statuses=[StatusEntry(message=message, kind=kind) for message, kind in presenter.statuses],
    )


@eligibility_router.get(
    "/ward",
    response_model=WardResponse,
)
async def get_ward(settings: SettingsDep, registry: RegistryDep) -> WardResponse:
    """Return the target ward's boundary for drawing a map overlay."""
    boundary = registry.require(settings.target_ward)
    return WardResponse(
        ward_id=settings.target_ward,
        name=boundary.name,
        vertex_count=len(boundary.vertices),
        center=boundary.center,
        bounds=boundary.bounds,
        vertices=list(boundary.vertices),
    )


@eligibility_router.post(
    "/check",
    response_model=EligibilityCheckResponse,
)
async def check_address(
    body: AddressInput,
    settings: SettingsDep,
    registry: RegistryDep,
    resolver: Annotated[GeocodeResolver, Depends(get_resolver)],
    sink: Annotated[BaseSubmissionSink, Depends(get_submission_sink)],
) -> EligibilityCheckResponse:
    """Resolve a home address, classify it against the ward and record the submission.

    A failed submission does not hide the result: the response carries
    ``submitted=false`` and the error message instead.
    """
    presenter = RecordingPresenter()
    session = EligibilitySession(
        resolver=resolver,
        registry=registry,
        ward_id=settings.target_ward,
        presenter=presenter,
        sink=sink,
    )

    try:
        outcome = await session.submit(body)
    except InputValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(e), "missing_fields": e.missing_fields},
        ) from e
    except SessionBusyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except SubmissionError:
        outcome = session.last_outcome
        if outcome is None:
            raise

    return _check_response(outcome, settings.target_ward, presenter)


@eligibility_router.post(
    "/probe",
    response_model=ManualProbeResponse,
)
async def probe_point(
    body: ManualProbeRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> ManualProbeResponse:
    """Classify a map click against the ward. Nothing is submitted."""
    presenter = RecordingPresenter()
    session = build_manual_session(settings, registry, presenter)
    outcome = session.probe(body.latitude, body.longitude)

    return ManualProbeResponse(
        ward_id=settings.target_ward,
        latitude=outcome.latitude,
        longitude=outcome.longitude,
        eligibility=outcome.eligibility,
        inside=outcome.inside,
        status=presenter.statuses[-1][0],
    )
