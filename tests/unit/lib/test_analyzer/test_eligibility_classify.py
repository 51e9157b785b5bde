"""Unit tests for tri-state eligibility classification."""

from ward_checker.lib.analyzer.eligibility import EligibilityResult, classify_point

SQUARE = [(-25.740, 28.220), (-25.740, 28.240), (-25.755, 28.240), (-25.755, 28.220)]


class TestClassifyPoint:
    """Tests for classify_point()."""

    def test_inside(self) -> None:
        assert classify_point((-25.746, 28.231), SQUARE, ward_id="44") is EligibilityResult.INSIDE

    def test_outside(self) -> None:
        assert classify_point((-25.700, 28.100), SQUARE, ward_id="44") is EligibilityResult.OUTSIDE

    def test_no_point_is_undetermined(self) -> None:
        assert classify_point(None, SQUARE) is EligibilityResult.UNDETERMINED

    def test_no_boundary_is_undetermined(self) -> None:
        assert classify_point((-25.746, 28.231), None, ward_id="99") is EligibilityResult.UNDETERMINED


class TestEligibilityResult:
    """Tests for EligibilityResult.is_eligible."""

    def test_is_eligible(self) -> None:
        assert EligibilityResult.INSIDE.is_eligible is True
        assert EligibilityResult.OUTSIDE.is_eligible is False
        assert EligibilityResult.UNDETERMINED.is_eligible is None

    def test_string_values(self) -> None:
        assert EligibilityResult.INSIDE == "inside"
        assert EligibilityResult("undetermined") is EligibilityResult.UNDETERMINED
