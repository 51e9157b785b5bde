"""Presentation-layer interface the eligibility session reports to.

The session never renders anything itself. A presenter turns its events
into status text, map markers and dialogs. Every hook defaults to a no-op
so implementations only override what their surface can show.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from ward_checker.lib.analyzer.eligibility import EligibilityResult
from ward_checker.lib.geocoder.base import ResolvedLocation
from ward_checker.schemas.eligibility import AddressInput


class StatusKind(StrEnum):
    """Visual category of a status message."""

    LOADING = "loading"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class BasePresenter:
    """No-op presenter; subclass and override the hooks you need."""

    def show_status(self, message: str, kind: StatusKind) -> None:
        """Replace the status line."""

    def set_busy(self, busy: bool) -> None:
        """Disable (busy) or re-enable the submit control."""

    def show_validation_error(self, missing_fields: list[str]) -> None:
        """Tell the user which required fields are empty."""

    def show_resolved(self, location: ResolvedLocation, result: EligibilityResult, ward_id: str) -> None:
        """Show the found home address, its coordinate and ward status."""

    def show_unresolved(self, address: AddressInput, ward_id: str) -> None:
        """Explain that the address could not be located automatically."""

    def enable_manual_probing(self, ward_id: str) -> None:
        """Start accepting map clicks."""

    def show_probe_result(self, point: tuple[float, float], result: EligibilityResult, ward_id: str) -> None:
        """Mark a clicked point as inside or outside."""

    def confirm(self, message: str) -> None:
        """Show a blocking confirmation dialog."""


@dataclass
class PresenterEvent:
    name: str
    payload: dict = field(default_factory=dict)


class RecordingPresenter(BasePresenter):
    """Collects every event; used by the HTTP API and in tests."""

    def __init__(self) -> None:
        self.events: list[PresenterEvent] = []
        self.statuses: list[tuple[str, StatusKind]] = []
        self.dialogs: list[str] = []
        self.busy = False

    def _record(self, name: str, **payload: object) -> None:
        self.events.append(PresenterEvent(name, dict(payload)))

    def show_status(self, message: str, kind: StatusKind) -> None:
        self.statuses.append((message, kind))
        self._record("status", message=message, kind=kind)

    def set_busy(self, busy: bool) -> None:
        self.busy = busy
        self._record("busy", busy=busy)

    def show_validation_error(self, missing_fields: list[str]) -> None:
        self._record("validation_error", missing_fields=list(missing_fields))

    def show_resolved(self, location: ResolvedLocation, result: EligibilityResult, ward_id: str) -> None:
        self._record("resolved", location=location, result=result, ward_id=ward_id)

    def show_unresolved(self, address: AddressInput, ward_id: str) -> None:
        self._record("unresolved", address=address, ward_id=ward_id)

    def enable_manual_probing(self, ward_id: str) -> None:
        self._record("manual_probing", ward_id=ward_id)

    def show_probe_result(self, point: tuple[float, float], result: EligibilityResult, ward_id: str) -> None:
        self._record("probe", point=point, result=result, ward_id=ward_id)

    def confirm(self, message: str) -> None:
        self.dialogs.append(message)
        self._record("confirm", message=message)

    def event_names(self) -> list[str]:
        return [e.name for e in self.events]
