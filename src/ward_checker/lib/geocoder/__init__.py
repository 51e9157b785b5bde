"""Geocoder library — address cleaning, query variations and resolution.

Public API:
    - normalize / normalize_fragment: Clean a free-text address fragment
    - normalize_address_case / strip_locality_suffix: The two cleaning steps
    - NormalizedAddressFragment: Original and cleaned text pair
    - LocalityConfig: City/region/country suffixes and local-relevance tokens
    - generate_variations: Six ordered queries for a street/suburb pair
    - BaseGeocoder: Abstract provider interface
    - GeocodeCandidate / ResolvedLocation: Provider and resolver result types
    - GeocodingProviderError: Provider transport/service failure
    - NominatimGeocoder: OpenStreetMap Nominatim provider
    - GeocodeResolver: Ordered, first-match resolution with local preference
    - get_geocoder: Provider factory/registry
"""

from typing import Any

from ward_checker.lib.geocoder.address import (
    NormalizedAddressFragment,
    normalize,
    normalize_address_case,
    normalize_fragment,
    strip_locality_suffix,
)
from ward_checker.lib.geocoder.base import (
    BaseGeocoder,
    GeocodeCandidate,
    GeocodingProviderError,
    ResolvedLocation,
)
from ward_checker.lib.geocoder.nominatim import NominatimGeocoder
from ward_checker.lib.geocoder.resolver import GeocodeResolver, is_local_candidate, select_candidate
from ward_checker.lib.geocoder.variations import LocalityConfig, QueryVariation, generate_variations

_PROVIDERS: dict[str, type[BaseGeocoder]] = {
    "nominatim": NominatimGeocoder,
}


def get_available_providers() -> list[str]:
    """Return the names of all registered geocoder providers."""
    return sorted(_PROVIDERS.keys())


def get_geocoder(provider: str = "nominatim", **kwargs: Any) -> BaseGeocoder:
    """Get a geocoder instance by provider name.

    Args:
        provider: Provider name (e.g., "nominatim").
        **kwargs: Additional arguments forwarded to the provider constructor
            (e.g., ``timeout=2.0``).

    Returns:
        An instance of the requested geocoder provider.

    Raises:
        ValueError: If the provider is not registered.
    """
    cls = _PROVIDERS.get(provider)
    if cls is None:
        msg = f"Unknown geocoder provider: {provider!r}. Available: {list(_PROVIDERS.keys())}"
        raise ValueError(msg)
    return cls(**kwargs)


__all__ = [
    "BaseGeocoder",
    "GeocodeCandidate",
    "GeocodeResolver",
    "GeocodingProviderError",
    "LocalityConfig",
    "NominatimGeocoder",
    "NormalizedAddressFragment",
    "QueryVariation",
    "ResolvedLocation",
    "generate_variations",
    "get_available_providers",
    "get_geocoder",
    "is_local_candidate",
    "normalize",
    "normalize_address_case",
    "normalize_fragment",
    "select_candidate",
    "strip_locality_suffix",
]
