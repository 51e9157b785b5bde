"""Static South African postal code and province lookup tables."""

from ward_checker.lib.za_lookup.postal_code import (
    PostalCodeResult,
    PostalCodeSuggestion,
    get_province_for_postal_code,
    is_valid_for_province,
    suggest_postal_code_corrections,
    validate_postal_code,
)
from ward_checker.lib.za_lookup.province import (
    PROVINCES,
    Province,
    ProvinceResult,
    get_province_by_code,
    is_valid_province,
    list_provinces,
    normalize_province_name,
    province_codes,
    province_names,
    validate_province,
)

__all__ = [
    "PROVINCES",
    "PostalCodeResult",
    "PostalCodeSuggestion",
    "Province",
    "ProvinceResult",
    "get_province_by_code",
    "get_province_for_postal_code",
    "is_valid_for_province",
    "is_valid_province",
    "list_provinces",
    "normalize_province_name",
    "province_codes",
    "province_names",
    "suggest_postal_code_corrections",
    "validate_postal_code",
    "validate_province",
]
