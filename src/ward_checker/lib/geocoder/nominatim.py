"""OpenStreetMap Nominatim geocoder provider.

Uses the Nominatim API (https://nominatim.org/release-docs/develop/api/Search/)
for free-text query resolution. Free but rate-limited to 1 req/sec, and the
usage policy requires an identifying User-Agent.
"""

import httpx
from loguru import logger

from ward_checker.lib.geocoder.base import BaseGeocoder, GeocodeCandidate, GeocodingProviderError

NOMINATIM_API_URL = "https://nominatim.openstreetmap.org/search"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "Ward-Boundary-Checker/1.0"


class NominatimGeocoder(BaseGeocoder):
    """OpenStreetMap Nominatim geocoder provider."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        email: str = "",
        user_agent: str = DEFAULT_USER_AGENT,
        country_codes: str = "za",
        base_url: str = NOMINATIM_API_URL,
    ) -> None:
        self._timeout = timeout
        self._email = email
        self._user_agent = user_agent
        self._country_codes = country_codes
        self._base_url = base_url

    @property
    def provider_name(self) -> str:
        return "nominatim"

    @property
    def rate_limit_delay(self) -> float:
        return 1.0

    async def search(self, query: str, *, limit: int = 3) -> list[GeocodeCandidate]:
        """Search Nominatim for up to ``limit`` candidates.

        Args:
            query: Fully formed query string.
            limit: Maximum number of candidates.

        Returns:
            Parsed candidates in provider order (possibly empty).

        Raises:
            GeocodingProviderError: On transport or service errors.
        """
        params: dict[str, str | int] = {
            "q": query,
            "format": "json",
            "limit": limit,
            "countrycodes": self._country_codes,
            "addressdetails": 1,
        }
        if self._email:
            params["email"] = self._email

        headers = {"User-Agent": self._user_agent}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._base_url, params=params, headers=headers)
                response.raise_for_status()

            data = response.json()
            return self._parse_response(data)

        except httpx.TimeoutException as e:
            logger.warning("Nominatim geocoder timeout for query (redacted)")
            raise GeocodingProviderError("nominatim", "Geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Nominatim geocoder HTTP error {e.response.status_code}")
            raise GeocodingProviderError(
                "nominatim",
                f"Provider returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.ConnectError as e:
            logger.warning("Nominatim geocoder connection error")
            raise GeocodingProviderError("nominatim", "Connection to geocoding provider failed") from e
        except GeocodingProviderError:
            raise
        except Exception as e:
            logger.exception("Nominatim geocoder unexpected error")
            raise GeocodingProviderError("nominatim", f"Unexpected error: {e}") from e

    def _parse_response(self, data: list[dict]) -> list[GeocodeCandidate]:
        """Parse a Nominatim response array into candidates.

        Entries with missing or malformed coordinates are skipped. A
        non-empty response in which nothing parses is treated as a provider
        error rather than as "no match".

        Args:
            data: Raw JSON response (list of results) from Nominatim.

        Returns:
            List of GeocodeCandidate, in response order.
        """
        if not data:
            return []
        if not isinstance(data, list):
            raise GeocodingProviderError("nominatim", f"Expected a JSON array, got {type(data).__name__}")

        candidates: list[GeocodeCandidate] = []
        for item in data:
            try:
                candidates.append(
                    GeocodeCandidate(
                        latitude=float(item["lat"]),
                        longitude=float(item["lon"]),
                        display_label=str(item.get("display_name") or ""),
                        raw=item,
                    )
                )
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping unparseable Nominatim result: {e}")

        if not candidates:
            raise GeocodingProviderError("nominatim", "Failed to parse any result in response")
        return candidates
