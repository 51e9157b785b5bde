"""South African postal code lookup.

Static range tables only: a code is valid when it falls in a province's
range, and is labelled with a major city or a coarse region.
"""

import re
from dataclasses import dataclass

# Province key -> inclusive code ranges. Checked in order; first match wins.
POSTAL_CODE_RANGES: dict[str, tuple[tuple[int, int], ...]] = {
    "western-cape": ((6500, 8999),),
    "eastern-cape": ((5200, 6499),),
    "northern-cape": ((8200, 8999),),
    "free-state": ((9300, 9999),),
    "kwazulu-natal": ((3200, 4999),),
    "north-west": ((2500, 2999),),
    "gauteng": ((1, 299), (1500, 2199)),
    "mpumalanga": ((1200, 1499),),
    "limpopo": ((700, 1199),),
}

MAJOR_CITIES: dict[str, tuple[int, ...]] = {
    "johannesburg": (2000, 2001, 2002, 2092, 2094, 2196),
    "cape-town": (8000, 8001, 8002, 8005, 8018),
    "durban": (4000, 4001, 4013, 4051, 4091),
    "pretoria": (1, 2, 7, 28, 81, 83, 84, 87),
    "port-elizabeth": (6000, 6001, 6006, 6013, 6020),
    "bloemfontein": (9300, 9301, 9306, 9320),
    "east-london": (5200, 5201, 5205, 5213, 5241),
    "pietermaritzburg": (3200, 3201, 3206, 3216),
    "nelspruit": (1200, 1201, 1206, 1210),
    "polokwane": (699, 700, 701),
}

# Fallback region labels, checked in order after the major-city table
_REGION_RANGES: tuple[tuple[int, int, str], ...] = (
    (1, 299, "PRETORIA CENTRAL"),
    (1500, 2199, "GAUTENG REGION"),
    (8000, 8099, "CAPE TOWN REGION"),
    (4000, 4099, "DURBAN REGION"),
)

SUGGESTION_DISTANCE = 100
MAX_SUGGESTIONS = 3

_NON_DIGITS = re.compile(r"\D")


def _label(key: str) -> str:
    return key.replace("-", " ").upper()


@dataclass(frozen=True)
class PostalCodeResult:
    """Outcome of validating a postal code."""

    valid: bool
    code: str | None = None
    province: str | None = None
    region: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class PostalCodeSuggestion:
    """A nearby valid code for an out-of-range input."""

    code: str
    province: str
    reason: str = "Nearest valid code"


def _clean(postal_code: str | int | None) -> str:
    return _NON_DIGITS.sub("", str(postal_code))


def region_for_code(code: int) -> str:
    """Major city for the code if listed, otherwise a coarse region label."""
    for city, codes in MAJOR_CITIES.items():
        if code in codes:
            return _label(city)
    for low, high, region in _REGION_RANGES:
        if low <= code <= high:
            return region
    return "RURAL AREA"


def validate_postal_code(postal_code: str | int | None) -> PostalCodeResult:
    """Validate a South African postal code.

    Non-digits are stripped; the remainder must be exactly four digits and
    fall inside a province range.
    """
    if postal_code is None or str(postal_code).strip() == "":
        return PostalCodeResult(valid=False, error="Postal code is required")

    cleaned = _clean(postal_code)
    if len(cleaned) != 4:
        return PostalCodeResult(valid=False, error="SA postal codes must be 4 digits")

    code = int(cleaned)
    for province, ranges in POSTAL_CODE_RANGES.items():
        if any(low <= code <= high for low, high in ranges):
            return PostalCodeResult(valid=True, code=cleaned, province=_label(province), region=region_for_code(code))

    return PostalCodeResult(valid=False, error="Invalid SA postal code range")


def get_province_for_postal_code(postal_code: str | int | None) -> str | None:
    result = validate_postal_code(postal_code)
    return result.province if result.valid else None


def is_valid_for_province(postal_code: str | int | None, province: str) -> bool:
    """Whether the code is valid and belongs to ``province`` (any case, spaces or dashes)."""
    result = validate_postal_code(postal_code)
    if not result.valid or result.province is None:
        return False
    wanted = re.sub(r"[\s-]+", "-", province.strip().lower())
    return re.sub(r"\s+", "-", result.province.lower()) == wanted


def suggest_postal_code_corrections(postal_code: str | int | None) -> list[PostalCodeSuggestion]:
    """Suggest range endpoints within 100 of a four-digit code (at most three)."""
    if postal_code is None:
        return []
    cleaned = _clean(postal_code)
    if len(cleaned) != 4:
        return []

    code = int(cleaned)
    suggestions: list[PostalCodeSuggestion] = []
    for province, ranges in POSTAL_CODE_RANGES.items():
        for low, high in ranges:
            if min(abs(code - low), abs(code - high)) > SUGGESTION_DISTANCE:
                continue
            nearest = low if code < low else high
            suggestions.append(PostalCodeSuggestion(code=f"{nearest:04d}", province=_label(province)))

    return suggestions[:MAX_SUGGESTIONS]
