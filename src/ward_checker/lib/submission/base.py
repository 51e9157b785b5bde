"""Submission sink interface and the flat record it accepts."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, fields

from ward_checker.lib.analyzer.eligibility import EligibilityResult

NOT_FOUND_GPS_PIN = "Not found automatically"


def format_gps_pin(coordinate: tuple[float, float] | None) -> str:
    """Format a coordinate to 6 decimal places, or the not-found marker."""
    if coordinate is None:
        return NOT_FOUND_GPS_PIN
    return f"{coordinate[0]:.6f}, {coordinate[1]:.6f}"


class SubmissionError(Exception):
    """Raised when the submission sink could not be reached.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


@dataclass(frozen=True)
class SubmissionRecord:
    """One completed automatic check, as sent to the sink."""

    first_name: str
    last_name: str
    street_address: str
    suburb: str
    cellphone: str
    coordinate: tuple[float, float] | None
    eligibility: EligibilityResult

    @property
    def gps_pin(self) -> str:
        return format_gps_pin(self.coordinate)

    def to_fields(self) -> dict[str, str]:
        """Flat record keyed by record field name."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "street_address": self.street_address,
            "suburb": self.suburb,
            "cellphone": self.cellphone,
            "gps_pin": self.gps_pin,
        }


@dataclass(frozen=True)
class FieldMapping:
    """Remote form field name for each record field."""

    first_name: str = "first_name"
    last_name: str = "last_name"
    street_address: str = "street_address"
    suburb: str = "suburb"
    cellphone: str = "cellphone"
    gps_pin: str = "gps_pin"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "FieldMapping":
        """Build from a ``{record_field: remote_field}`` mapping.

        Raises:
            ValueError: On unknown record fields or empty remote names.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            msg = f"Unknown submission fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        empty = [k for k, v in mapping.items() if not str(v).strip()]
        if empty:
            msg = f"Empty remote field name for: {', '.join(sorted(empty))}"
            raise ValueError(msg)
        return cls(**{k: str(v).strip() for k, v in mapping.items()})

    def apply(self, record: SubmissionRecord) -> dict[str, str]:
        """Map a record onto the remote field names."""
        return {getattr(self, name): value for name, value in record.to_fields().items()}


class BaseSubmissionSink(ABC):
    """Accepts completed automatic-mode records."""

    @abstractmethod
    async def submit(self, record: SubmissionRecord) -> None:
        """Deliver one record.

        Raises:
            SubmissionError: If the record could not be delivered.
        """
