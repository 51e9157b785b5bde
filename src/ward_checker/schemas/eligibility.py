"""Pydantic v2 schemas for address input and eligibility results."""

from pydantic import BaseModel, Field

from ward_checker.lib.analyzer.eligibility import EligibilityResult

REQUIRED_ADDRESS_FIELDS: tuple[str, ...] = ("first_name", "last_name", "street_address", "suburb", "cellphone")


class InputValidationError(ValueError):
    """A required address form field is empty.

    Args:
        missing_fields: Names of the empty required fields.
    """

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(f"Please fill in all required fields: {', '.join(missing_fields)}")


class AddressInput(BaseModel):
    """Self-reported person and home address, as entered on the form."""

    first_name: str = Field(default="", max_length=200)
    last_name: str = Field(default="", max_length=200)
    street_address: str = Field(default="", max_length=500)
    suburb: str = Field(default="", max_length=200)
    cellphone: str = Field(default="", max_length=50)

    def missing_fields(self) -> list[str]:
        """Required fields that are empty or whitespace-only."""
        return [name for name in REQUIRED_ADDRESS_FIELDS if not getattr(self, name).strip()]


class LocationResponse(BaseModel):
    """A resolved home location."""

    latitude: float
    longitude: float
    display_label: str
    query: str
    attempt: int


class StatusEntry(BaseModel):
    """One status line shown to the user during a check."""

    message: str
    kind: str


class EligibilityCheckResponse(BaseModel):
    """Outcome of an automatic address check."""

    ward_id: str
    eligibility: EligibilityResult
    location: LocationResponse | None = None
    gps_pin: str
    submitted: bool
    submission_error: str | None = None
    statuses: list[StatusEntry] = Field(default_factory=list)


class ManualProbeRequest(BaseModel):
    """A map click to classify."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class ManualProbeResponse(BaseModel):
    """Classification of a clicked coordinate."""

    ward_id: str
    latitude: float
    longitude: float
    eligibility: EligibilityResult
    inside: bool
    status: str


class WardResponse(BaseModel):
    """Ward boundary summary for drawing a map overlay."""

    ward_id: str
    name: str
    vertex_count: int
    center: tuple[float, float]
    bounds: tuple[tuple[float, float], tuple[float, float]]
    vertices: list[tuple[float, float]]
