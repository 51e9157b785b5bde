"""Geocode resolver — turns a street/suburb pair into one best-effort location.

Query variations are tried strictly in order. The first variation whose
response contains any candidates wins: its locally-labelled candidates are
preferred, otherwise its first candidate is taken as-is. Candidates from
different variations are never compared with each other.
"""

import asyncio
from collections.abc import Sequence

from loguru import logger

from ward_checker.lib.geocoder.address import normalize
from ward_checker.lib.geocoder.base import (
    BaseGeocoder,
    GeocodeCandidate,
    GeocodingProviderError,
    ResolvedLocation,
)
from ward_checker.lib.geocoder.variations import LocalityConfig, QueryVariation, generate_variations

DEFAULT_RESULT_LIMIT = 3


def is_local_candidate(candidate: GeocodeCandidate, local_tokens: Sequence[str]) -> bool:
    """Whether the candidate's label mentions any local place token (case-insensitive)."""
    label = candidate.display_label.lower()
    return any(token in label for token in local_tokens)


def select_candidate(candidates: Sequence[GeocodeCandidate], local_tokens: Sequence[str]) -> GeocodeCandidate | None:
    """Pick the first local candidate, falling back to the first candidate.

    Args:
        candidates: Candidates from a single query, in provider order.
        local_tokens: Lower-cased local place tokens.

    Returns:
        The selected candidate, or None when ``candidates`` is empty.
    """
    if not candidates:
        return None
    for candidate in candidates:
        if is_local_candidate(candidate, local_tokens):
            return candidate
    return candidates[0]


class GeocodeResolver:
    """Resolve user-entered street and suburb text against a geocoding provider.

    Args:
        geocoder: Provider to query.
        locality: Locality suffixes and local-relevance tokens.
        result_limit: Candidates requested per query.
        retry_delay: Seconds to wait after an unsuccessful attempt when
            another variation remains. Defaults to the provider's
            ``rate_limit_delay``.
    """

    def __init__(
        self,
        geocoder: BaseGeocoder,
        locality: LocalityConfig | None = None,
        *,
        result_limit: int = DEFAULT_RESULT_LIMIT,
        retry_delay: float | None = None,
    ) -> None:
        self._geocoder = geocoder
        self._locality = locality or LocalityConfig()
        self._result_limit = result_limit
        self._retry_delay = geocoder.rate_limit_delay if retry_delay is None else retry_delay

    @property
    def locality(self) -> LocalityConfig:
        return self._locality

    @property
    def retry_delay(self) -> float:
        return self._retry_delay

    def build_variations(self, street: str, suburb: str) -> QueryVariation:
        """Normalize both fragments and expand them into ordered queries."""
        names = self._locality.locality_names
        clean_street = normalize(street, names)
        clean_suburb = normalize(suburb, names)
        logger.debug(f"Normalized address fragments: {clean_street!r}, {clean_suburb!r}")
        return generate_variations(clean_street, clean_suburb, self._locality)

    async def resolve(self, street: str, suburb: str) -> ResolvedLocation | None:
        """Resolve an address to a single location.

        Provider failures and empty responses are recovered locally by moving
        on to the next variation; only total exhaustion yields None.

        Args:
            street: Raw street text.
            suburb: Raw suburb text.

        Returns:
            ResolvedLocation, or None when every variation came back empty.
        """
        variations = self.build_variations(street, suburb)
        total = len(variations)

        for attempt, query in enumerate(variations, start=1):
            logger.debug(f"Geocode attempt {attempt}/{total}: {query}")
            try:
                candidates = await self._geocoder.search(query, limit=self._result_limit)
            except GeocodingProviderError as e:
                logger.warning(f"Geocode attempt {attempt}/{total} failed: {e}")
                candidates = []

            selected = select_candidate(candidates, self._locality.local_tokens)
            if selected is not None:
                logger.info(
                    f"Resolved address on attempt {attempt}/{total} "
                    f"({len(candidates)} candidate(s)): {selected.display_label}"
                )
                return ResolvedLocation.from_candidate(selected, query=query, attempt=attempt)

            # A failed request is paced like an empty one.
            if attempt < total and self._retry_delay > 0:
                await asyncio.sleep(self._retry_delay)

        logger.info(f"No location found after {total} attempts")
        return None
