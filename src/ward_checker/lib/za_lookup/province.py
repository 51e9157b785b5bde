"""South African province name lookup by key, name, code or alias."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Province:
    key: str
    name: str
    capital: str
    code: str
    aliases: tuple[str, ...] = ()


PROVINCES: tuple[Province, ...] = (
    Province(
        "western-cape",
        "Western Cape",
        "Cape Town",
        "WC",
        ("western cape", "west cape", "wc", "cape town province"),
    ),
    Province("eastern-cape", "Eastern Cape", "Bhisho", "EC", ("eastern cape", "east cape", "ec")),
    Province("northern-cape", "Northern Cape", "Kimberley", "NC", ("northern cape", "north cape", "nc")),
    Province("free-state", "Free State", "Bloemfontein", "FS", ("free state", "freestate", "fs", "orange free state")),
    Province(
        "kwazulu-natal",
        "KwaZulu-Natal",
        "Pietermaritzburg",
        "KZN",
        ("kwazulu natal", "kwazulu-natal", "kzn", "natal", "zulu natal"),
    ),
    Province("north-west", "North West", "Mahikeng", "NW", ("north west", "northwest", "nw", "north-west")),
    Province(
        "gauteng",
        "Gauteng",
        "Johannesburg",
        "GP",
        ("gauteng", "gp", "pwv", "pretoria-witwatersrand-vereeniging"),
    ),
    Province("mpumalanga", "Mpumalanga", "Nelspruit", "MP", ("mpumalanga", "mp", "eastern transvaal")),
    Province("limpopo", "Limpopo", "Polokwane", "LP", ("limpopo", "lp", "northern province", "northern transvaal")),
)

MAX_SUGGESTIONS = 3


@dataclass(frozen=True)
class ProvinceResult:
    """Outcome of validating a province name."""

    valid: bool
    province: Province | None = None
    error: str | None = None
    suggestions: list[str] = field(default_factory=list)


def _matches(province: Province, normalized: str) -> bool:
    return normalized in (province.key, province.name.lower(), province.code.lower()) or normalized in province.aliases


def province_suggestions(text: str) -> list[str]:
    """Province names that contain, or are hinted at by, the input (at most three)."""
    needle = text.strip().lower()
    if not needle:
        return []
    suggestions: list[str] = []
    for province in PROVINCES:
        name = province.name.lower()
        hit = needle in name or name.split(" ")[0] in needle
        hit = hit or any(needle in alias or alias in needle for alias in province.aliases)
        if hit and province.name not in suggestions:
            suggestions.append(province.name)
    return suggestions[:MAX_SUGGESTIONS]


def validate_province(text: str | None) -> ProvinceResult:
    """Match a province by key, name, code or alias (case-insensitive)."""
    if text is None or not str(text).strip():
        return ProvinceResult(valid=False, error="Province is required")

    normalized = str(text).strip().lower()
    for province in PROVINCES:
        if _matches(province, normalized):
            return ProvinceResult(valid=True, province=province)

    return ProvinceResult(valid=False, error="Invalid SA province", suggestions=province_suggestions(normalized))


def get_province_by_code(code: str | None) -> Province | None:
    if not code:
        return None
    wanted = str(code).strip().upper()
    return next((p for p in PROVINCES if p.code == wanted), None)


def normalize_province_name(text: str | None) -> str | None:
    """Canonical province name, or None if the input does not match."""
    result = validate_province(text)
    return result.province.name if result.province else None


def is_valid_province(text: str | None) -> bool:
    return validate_province(text).valid


def province_codes() -> list[str]:
    return [p.code for p in PROVINCES]


def province_names() -> list[str]:
    return [p.name for p in PROVINCES]


def list_provinces() -> list[Province]:
    return list(PROVINCES)
