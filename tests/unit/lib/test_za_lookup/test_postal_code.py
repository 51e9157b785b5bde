"""Unit tests for South African postal code lookup."""

import pytest

from ward_checker.lib.za_lookup import (
    get_province_for_postal_code,
    is_valid_for_province,
    suggest_postal_code_corrections,
    validate_postal_code,
)


class TestValidatePostalCode:
    """Tests for validate_postal_code()."""

    def test_pretoria_code(self) -> None:
        result = validate_postal_code("0028")
        assert result.valid is True
        assert result.code == "0028"
        assert result.province == "GAUTENG"
        assert result.region == "PRETORIA"

    def test_pretoria_central_fallback(self) -> None:
        result = validate_postal_code("0150")
        assert result.province == "GAUTENG"
        assert result.region == "PRETORIA CENTRAL"

    def test_johannesburg(self) -> None:
        result = validate_postal_code(2001)
        assert result.province == "GAUTENG"
        assert result.region == "JOHANNESBURG"

    def test_first_matching_province_wins(self) -> None:
        result = validate_postal_code("8001")
        assert result.province == "WESTERN CAPE"
        assert result.region == "CAPE TOWN"

    def test_rural_area(self) -> None:
        result = validate_postal_code("8500")
        assert result.valid is True
        assert result.region == "RURAL AREA"

    def test_non_digits_stripped(self) -> None:
        result = validate_postal_code("12-34")
        assert result.code == "1234"
        assert result.province == "MPUMALANGA"

    @pytest.mark.parametrize(
        ("code", "error"),
        [
            (None, "Postal code is required"),
            ("", "Postal code is required"),
            ("123", "SA postal codes must be 4 digits"),
            ("12345", "SA postal codes must be 4 digits"),
            ("0500", "Invalid SA postal code range"),
        ],
    )
    def test_invalid(self, code: str | None, error: str) -> None:
        result = validate_postal_code(code)
        assert result.valid is False
        assert result.error == error


class TestProvinceForPostalCode:
    """Tests for get_province_for_postal_code() and is_valid_for_province()."""

    def test_province(self) -> None:
        assert get_province_for_postal_code("2001") == "GAUTENG"
        assert get_province_for_postal_code("0500") is None

    def test_valid_for_province(self) -> None:
        assert is_valid_for_province("0028", "gauteng") is True
        assert is_valid_for_province("8001", "Western Cape") is True
        assert is_valid_for_province("8001", "western-cape") is True
        assert is_valid_for_province("0028", "Western Cape") is False
        assert is_valid_for_province("0500", "gauteng") is False


class TestSuggestPostalCodeCorrections:
    """Tests for suggest_postal_code_corrections()."""

    def test_nearest_upper_endpoint(self) -> None:
        suggestions = suggest_postal_code_corrections("0350")
        assert [(s.code, s.province) for s in suggestions] == [("0299", "GAUTENG")]

    def test_nearest_lower_endpoint(self) -> None:
        suggestions = suggest_postal_code_corrections("0650")
        assert [(s.code, s.province) for s in suggestions] == [("0700", "LIMPOPO")]

    def test_nothing_close(self) -> None:
        assert suggest_postal_code_corrections("0500") == []

    def test_wrong_length(self) -> None:
        assert suggest_postal_code_corrections("123") == []
