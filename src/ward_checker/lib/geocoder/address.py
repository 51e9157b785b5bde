"""Free-text address fragment cleaning.

Strips a trailing locality (city, region or country the user typed out
themselves) and re-cases the remainder so geocoding queries are consistent:
directional and provincial abbreviations upper-case, ordinals untouched,
everything else title-cased.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_LOCALITY_NAMES: tuple[str, ...] = ("Pretoria", "Gauteng", "South Africa")

# Directional and provincial abbreviations kept upper-case wherever they appear
UPPERCASE_WORDS: frozenset[str] = frozenset({"N", "S", "E", "W", "NE", "NW", "SE", "SW", "GP", "ZA"})

_ORDINAL_PATTERN = re.compile(r"^\d+(st|nd|rd|th)$")


@dataclass(frozen=True)
class NormalizedAddressFragment:
    """A raw address fragment and its cleaned form."""

    original: str
    cleaned: str


def _locality_pattern(localities: Iterable[str]) -> re.Pattern[str]:
    names = "|".join(re.escape(name) for name in localities)
    return re.compile(rf", ({names}).*$", re.IGNORECASE | re.DOTALL)


_DEFAULT_LOCALITY_PATTERN = _locality_pattern(DEFAULT_LOCALITY_NAMES)


def strip_locality_suffix(text: str, localities: Iterable[str] | None = None) -> str:
    """Remove a trailing ``, <locality>...`` tail and surrounding whitespace.

    Everything from the first comma-separated known locality to the end of
    the string is dropped, so ``"Hatfield, Pretoria, 0028"`` becomes
    ``"Hatfield"``.

    Args:
        text: Raw address fragment.
        localities: Locality names to strip; defaults to Pretoria, Gauteng and South Africa.

    Returns:
        The fragment without its locality tail.
    """
    pattern = _DEFAULT_LOCALITY_PATTERN if localities is None else _locality_pattern(localities)
    return pattern.sub("", text).strip()


def _recase_word(word: str) -> str:
    if word.upper() in UPPERCASE_WORDS:
        return word.upper()
    if _ORDINAL_PATTERN.match(word):
        return word
    return word[:1].upper() + word[1:]


def normalize_address_case(text: str) -> str:
    """Lower-case the text, then re-case it word by word.

    Words are split on single spaces so the original spacing survives.

    Args:
        text: Address fragment.

    Returns:
        Re-cased fragment, e.g. ``"123 MAIN street nw"`` -> ``"123 Main Street NW"``.
    """
    return " ".join(_recase_word(word) for word in text.lower().split(" "))


def normalize_fragment(text: str, localities: Iterable[str] | None = None) -> NormalizedAddressFragment:
    """Strip the locality tail and re-case a raw fragment."""
    cleaned = normalize_address_case(strip_locality_suffix(text, localities))
    return NormalizedAddressFragment(original=text, cleaned=cleaned)


def normalize(text: str, localities: Iterable[str] | None = None) -> str:
    """Return the cleaned form of a raw address fragment (never raises)."""
    return normalize_fragment(text or "", localities).cleaned
