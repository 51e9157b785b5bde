"""Eligibility session — orchestrates one user's ward check.

Automatic mode resolves a typed address, classifies it, tells the
presenter and reports the record to the submission sink exactly once per
submission. Manual mode classifies clicked coordinates and never reports
anything. The two modes share one status surface; while manual mode owns
it, status updates from an automatic check are dropped.
"""

from dataclasses import dataclass
from enum import StrEnum

from loguru import logger

from ward_checker.lib.analyzer.eligibility import EligibilityResult, classify_point
from ward_checker.lib.boundary_loader import BoundaryRegistry, WardBoundary
from ward_checker.lib.geocoder.base import ResolvedLocation
from ward_checker.lib.geocoder.resolver import GeocodeResolver
from ward_checker.lib.submission.base import BaseSubmissionSink, SubmissionError, SubmissionRecord, format_gps_pin
from ward_checker.schemas.eligibility import AddressInput, InputValidationError
from ward_checker.services.presentation import BasePresenter, StatusKind


class SessionBusyError(RuntimeError):
    """An automatic check is already in flight for this session."""


class SessionStateError(RuntimeError):
    """The requested operation is not valid in the session's current state."""


class AutomaticPhase(StrEnum):
    """Progress of the automatic check currently in flight."""

    IDLE = "idle"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    CLASSIFIED = "classified"
    REPORTED = "reported"


class DisplayMode(StrEnum):
    """Which flow owns the status surface."""

    IDLE = "idle"
    AUTOMATIC_RESULT = "automatic_result"
    MANUAL_PROBE = "manual_probe"


_PHASE_TRANSITIONS: dict[AutomaticPhase, frozenset[AutomaticPhase]] = {
    AutomaticPhase.IDLE: frozenset({AutomaticPhase.RESOLVING}),
    AutomaticPhase.RESOLVING: frozenset({AutomaticPhase.RESOLVED, AutomaticPhase.UNRESOLVED}),
    AutomaticPhase.RESOLVED: frozenset({AutomaticPhase.CLASSIFIED}),
    AutomaticPhase.UNRESOLVED: frozenset({AutomaticPhase.CLASSIFIED}),
    AutomaticPhase.CLASSIFIED: frozenset({AutomaticPhase.REPORTED}),
    AutomaticPhase.REPORTED: frozenset({AutomaticPhase.IDLE}),
}


@dataclass(frozen=True)
class AutomaticOutcome:
    """Result of one automatic check."""

    address: AddressInput
    location: ResolvedLocation | None
    eligibility: EligibilityResult
    submitted: bool
    submission_error: str | None = None

    @property
    def gps_pin(self) -> str:
        return format_gps_pin(self.location.coordinate if self.location else None)


@dataclass(frozen=True)
class ProbeOutcome:
    """Classification of one clicked coordinate."""

    latitude: float
    longitude: float
    eligibility: EligibilityResult

    @property
    def inside(self) -> bool:
        return self.eligibility is EligibilityResult.INSIDE


class EligibilitySession:
    """Per-user check session; build one per page-equivalent visit.

    Args:
        registry: Ward boundaries.
        ward_id: Ward every check is evaluated against.
        presenter: Presentation surface.
        resolver: Address resolver. Only automatic checks need one.
        sink: Receives automatic-mode records. Only automatic checks need one.

    Raises:
        BoundaryNotFoundError: If ``ward_id`` has no configured boundary.
    """

    def __init__(
        self,
        *,
        registry: BoundaryRegistry,
        ward_id: str,
        presenter: BasePresenter,
        resolver: GeocodeResolver | None = None,
        sink: BaseSubmissionSink | None = None,
    ) -> None:
        self._boundary = registry.require(ward_id)
        self._resolver = resolver
        self._registry = registry
        self._ward_id = ward_id
        self._presenter = presenter
        self._sink = sink

        self._phase = AutomaticPhase.IDLE
        self._display = DisplayMode.IDLE
        self._home_location: tuple[float, float] | None = None
        self._last_outcome: AutomaticOutcome | None = None
        self._last_probe: ProbeOutcome | None = None

    # ── State ─────────────────────────────────────────────────────

    @property
    def ward_id(self) -> str:
        return self._ward_id

    @property
    def boundary(self) -> WardBoundary:
        return self._boundary

    @property
    def phase(self) -> AutomaticPhase:
        return self._phase

    @property
    def display(self) -> DisplayMode:
        return self._display

    @property
    def manual_mode(self) -> bool:
        return self._display is DisplayMode.MANUAL_PROBE

    @property
    def home_location(self) -> tuple[float, float] | None:
        """Last resolved or clicked coordinate."""
        return self._home_location

    @property
    def last_outcome(self) -> AutomaticOutcome | None:
        return self._last_outcome

    @property
    def last_probe(self) -> ProbeOutcome | None:
        return self._last_probe

    def _transition(self, target: AutomaticPhase) -> None:
        if target not in _PHASE_TRANSITIONS[self._phase]:
            msg = f"Invalid session transition {self._phase} -> {target}"
            raise SessionStateError(msg)
        logger.debug(f"Session phase {self._phase} -> {target}")
        self._phase = target

    # ── Classification ────────────────────────────────────────────

    def check_eligibility(self, point: tuple[float, float] | None) -> EligibilityResult:
        """Classify a coordinate against the session's ward."""
        boundary = self._registry.get(self._ward_id)
        return classify_point(point, boundary.vertices if boundary else None, ward_id=self._ward_id)

    # ── Automatic mode ────────────────────────────────────────────

    def _automatic_status(self, message: str, kind: StatusKind) -> None:
        if self.manual_mode:
            logger.debug(f"Skipping automatic status in manual mode: {message}")
            return
        self._presenter.show_status(message, kind)

    async def submit(self, address: AddressInput) -> AutomaticOutcome:
        """Run one automatic check: validate, resolve, classify, report.

        The classification is shown before the sink is called, so a sink
        failure never hides the result.

        Args:
            address: The submitted form.

        Returns:
            AutomaticOutcome for the submission.

        Raises:
            InputValidationError: If a required field is empty (nothing is resolved or reported).
            SessionBusyError: If another automatic check is in flight.
            SessionStateError: If the session was built without a resolver or sink.
            SubmissionError: If the sink failed; ``last_outcome`` still holds the result.
        """
        if self._resolver is None or self._sink is None:
            msg = "Automatic checks need a resolver and a submission sink"
            raise SessionStateError(msg)

        missing = address.missing_fields()
        if missing:
            self._presenter.show_validation_error(missing)
            self._presenter.confirm("Please fill in all required fields before submitting.")
            raise InputValidationError(missing)

        if self._phase is not AutomaticPhase.IDLE:
            msg = "An address check is already in progress"
            raise SessionBusyError(msg)

        self._transition(AutomaticPhase.RESOLVING)
        self._presenter.set_busy(True)
        eligibility = EligibilityResult.UNDETERMINED
        try:
            self._automatic_status("Looking up your home address...", StatusKind.LOADING)
            location = await self._resolver.resolve(address.street_address, address.suburb)

            if location is not None:
                self._transition(AutomaticPhase.RESOLVED)
                self._home_location = location.coordinate
                eligibility = self.check_eligibility(location.coordinate)
                self._transition(AutomaticPhase.CLASSIFIED)
                self._presenter.show_resolved(location, eligibility, self._ward_id)
            else:
                self._transition(AutomaticPhase.UNRESOLVED)
                self._transition(AutomaticPhase.CLASSIFIED)
                self._presenter.show_unresolved(address, self._ward_id)

            if not self.manual_mode:
                self._display = DisplayMode.AUTOMATIC_RESULT
            logger.info(f"Automatic check for ward {self._ward_id}: {eligibility}")

            record = SubmissionRecord(
                first_name=address.first_name,
                last_name=address.last_name,
                street_address=address.street_address,
                suburb=address.suburb,
                cellphone=address.cellphone,
                coordinate=location.coordinate if location else None,
                eligibility=eligibility,
            )
            try:
                await self._sink.submit(record)
            except SubmissionError as e:
                logger.error(f"Form submission error: {e}")
                self._last_outcome = AutomaticOutcome(address, location, eligibility, False, str(e))
                self._transition(AutomaticPhase.REPORTED)
                self._show_final_status(eligibility)
                raise

            self._last_outcome = AutomaticOutcome(address, location, eligibility, True)
            self._transition(AutomaticPhase.REPORTED)
            self._show_final_status(eligibility)
            return self._last_outcome
        finally:
            self._phase = AutomaticPhase.IDLE
            self._presenter.set_busy(False)

    def _show_final_status(self, eligibility: EligibilityResult) -> None:
        if self.manual_mode:
            logger.debug("Skipping final status in manual mode")
            return

        ward = self._boundary.name
        if eligibility is EligibilityResult.INSIDE:
            self._presenter.show_status("Eligibility confirmed!", StatusKind.SUCCESS)
            self._presenter.confirm(
                f"Great news! Your home address is INSIDE {ward}.\n\nYou ARE eligible to vote in this by-election!"
            )
        elif eligibility is EligibilityResult.OUTSIDE:
            self._presenter.show_status("Not Eligible", StatusKind.WARNING)
            self._presenter.confirm(
                f"Your home address is OUTSIDE {ward}.\n\nYou are NOT eligible to vote in this by-election."
            )
        else:
            self._presenter.show_status("Address lookup failed - try visual check below", StatusKind.WARNING)
            self._presenter.confirm(
                f"We couldn't locate your address automatically.\n\nUse the map to check your location against {ward}."
            )

    # ── Manual mode ───────────────────────────────────────────────

    def enter_manual_mode(self) -> None:
        """Hand the status surface to map-click probing.

        A previous automatic result is kept; probing only adds point checks.
        """
        self._display = DisplayMode.MANUAL_PROBE
        logger.info(f"Manual mode enabled for ward {self._ward_id}")
        self._presenter.enable_manual_probing(self._ward_id)
        self._presenter.show_status(
            "Click anywhere on the map to check eligibility for that location",
            StatusKind.LOADING,
        )

    def leave_manual_mode(self) -> None:
        """Return the status surface to the automatic flow."""
        if not self.manual_mode:
            return
        self._display = DisplayMode.AUTOMATIC_RESULT if self._last_outcome else DisplayMode.IDLE
        logger.info("Manual mode disabled")

    def probe(self, latitude: float, longitude: float) -> ProbeOutcome:
        """Classify a clicked coordinate. Never reports to the sink.

        Raises:
            SessionStateError: If manual mode is not active.
            ValueError: If the coordinate is out of range.
        """
        if not self.manual_mode:
            msg = "Map probing requires manual mode"
            raise SessionStateError(msg)
        if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
            msg = f"Coordinate out of range: {latitude}, {longitude}"
            raise ValueError(msg)

        point = (latitude, longitude)
        self._home_location = point
        eligibility = self.check_eligibility(point)
        outcome = ProbeOutcome(latitude, longitude, eligibility)
        self._last_probe = outcome
        logger.debug(f"Manual probe at {latitude:.6f}, {longitude:.6f}: {eligibility}")

        ward = self._boundary.name
        self._presenter.show_probe_result(point, eligibility, self._ward_id)
        if outcome.inside:
            self._presenter.show_status(
                f"That location is INSIDE {ward}! Click elsewhere to check other locations.",
                StatusKind.SUCCESS,
            )
        else:
            self._presenter.show_status(
                f"That location is OUTSIDE {ward}. Click elsewhere to check other locations.",
                StatusKind.ERROR,
            )
        return outcome
