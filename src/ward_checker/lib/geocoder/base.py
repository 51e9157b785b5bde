"""Abstract geocoding provider interface and the value types it produces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GeocodeCandidate:
    """One candidate location returned by a provider for a free-text query."""

    latitude: float
    longitude: float
    display_label: str
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not (-90 <= self.latitude <= 90):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise ValueError(msg)
        if not (-180 <= self.longitude <= 180):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise ValueError(msg)

    @property
    def coordinate(self) -> tuple[float, float]:
        """(latitude, longitude) pair."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class ResolvedLocation:
    """The single location chosen by the resolver for an address.

    ``query`` and ``attempt`` record which query variation produced it
    (``attempt`` is 1-based).
    """

    latitude: float
    longitude: float
    display_label: str
    query: str = ""
    attempt: int = 0

    @property
    def coordinate(self) -> tuple[float, float]:
        """(latitude, longitude) pair."""
        return (self.latitude, self.longitude)

    @classmethod
    def from_candidate(cls, candidate: GeocodeCandidate, *, query: str = "", attempt: int = 0) -> "ResolvedLocation":
        return cls(
            latitude=candidate.latitude,
            longitude=candidate.longitude,
            display_label=candidate.display_label,
            query=query,
            attempt=attempt,
        )


class GeocodingProviderError(Exception):
    """Raised when a geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, connection error)
    from a successful response with no candidates (which returns an empty list).

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class BaseGeocoder(ABC):
    """Abstract geocoder interface. All providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @property
    def rate_limit_delay(self) -> float:
        """Minimum delay in seconds between requests (for rate-limited providers)."""
        return 0.0

    @abstractmethod
    async def search(self, query: str, *, limit: int = 3) -> list[GeocodeCandidate]:
        """Look up candidate locations for a free-text query.

        Args:
            query: Fully formed query string.
            limit: Maximum number of candidates to request.

        Returns:
            Candidates in provider order; empty if nothing matched.

        Raises:
            GeocodingProviderError: On transport or service errors.
        """
