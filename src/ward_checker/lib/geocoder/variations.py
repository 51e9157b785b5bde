"""Query variation generation — from most to least specific."""

from dataclasses import dataclass

# Ordered, immutable list of fully formed query strings
QueryVariation = tuple[str, ...]


@dataclass(frozen=True)
class LocalityConfig:
    """Locality suffixes appended to queries and the local-relevance tokens.

    ``local_tokens`` are matched case-insensitively against candidate
    display labels; they are stored lower-cased.
    """

    city: str = "Pretoria"
    region: str = "Gauteng"
    country: str = "South Africa"
    country_code: str = "za"
    local_tokens: tuple[str, ...] = ("gauteng", "pretoria", "tshwane")

    def __post_init__(self) -> None:
        object.__setattr__(self, "local_tokens", tuple(t.strip().lower() for t in self.local_tokens if t.strip()))

    @property
    def locality_names(self) -> tuple[str, str, str]:
        """Names stripped from the end of user-entered fragments."""
        return (self.city, self.region, self.country)


def generate_variations(street: str, suburb: str, locality: LocalityConfig | None = None) -> QueryVariation:
    """Expand a cleaned street/suburb pair into six queries, most specific first.

    Args:
        street: Cleaned street fragment.
        suburb: Cleaned suburb fragment.
        locality: City/region/country suffixes; defaults to Pretoria, Gauteng, South Africa.

    Returns:
        Exactly six query strings in priority order.
    """
    loc = locality or LocalityConfig()
    city, region, country = loc.city, loc.region, loc.country
    return (
        f"{street}, {suburb}, {city}, {region}, {country}",
        f"{street}, {suburb}, {city}, {country}",
        f"{street}, {suburb}, {region}, {country}",
        f"{suburb}, {city}, {region}, {country}",
        f"{suburb}, {city}, {country}",
        f"{suburb}, {region}, {country}",
    )
