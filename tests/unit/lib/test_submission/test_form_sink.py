"""Unit tests for submission sinks and record formatting."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from ward_checker.lib.analyzer.eligibility import EligibilityResult
from ward_checker.lib.submission import (
    FieldMapping,
    FormSubmissionSink,
    LogOnlySubmissionSink,
    SubmissionError,
    SubmissionRecord,
    format_gps_pin,
)


def _record(coordinate: tuple[float, float] | None = (-25.746, 28.231)) -> SubmissionRecord:
    return SubmissionRecord(
        first_name="Thandi",
        last_name="Mokoena",
        street_address="1085 Burnett Street",
        suburb="Hatfield",
        cellphone="0821234567",
        coordinate=coordinate,
        eligibility=EligibilityResult.INSIDE if coordinate else EligibilityResult.UNDETERMINED,
    )


class TestFormatGpsPin:
    """Tests for format_gps_pin()."""

    def test_six_decimals(self) -> None:
        assert format_gps_pin((-25.746, 28.231)) == "-25.746000, 28.231000"

    def test_rounds(self) -> None:
        assert format_gps_pin((-25.74612345, 28.2319999)) == "-25.746123, 28.232000"

    def test_not_found(self) -> None:
        assert format_gps_pin(None) == "Not found automatically"


class TestFieldMapping:
    """Tests for FieldMapping."""

    def test_default_uses_record_names(self) -> None:
        assert FieldMapping().apply(_record()) == {
            "first_name": "Thandi",
            "last_name": "Mokoena",
            "street_address": "1085 Burnett Street",
            "suburb": "Hatfield",
            "cellphone": "0821234567",
            "gps_pin": "-25.746000, 28.231000",
        }

    def test_remote_names(self) -> None:
        fields = FieldMapping.from_mapping({"first_name": "entry.1", "gps_pin": "entry.6"})
        payload = fields.apply(_record(None))
        assert payload["entry.1"] == "Thandi"
        assert payload["entry.6"] == "Not found automatically"
        assert payload["suburb"] == "Hatfield"

    def test_unknown_field(self) -> None:
        with pytest.raises(ValueError, match="Unknown submission fields"):
            FieldMapping.from_mapping({"email": "entry.9"})

    def test_empty_remote_name(self) -> None:
        with pytest.raises(ValueError, match="Empty remote field name"):
            FieldMapping.from_mapping({"suburb": "  "})


class TestFormSubmissionSink:
    """Tests for FormSubmissionSink."""

    async def test_posts_form_encoded_payload(self) -> None:
        sink = FormSubmissionSink("https://forms.example.org/submit", FieldMapping.from_mapping({"suburb": "area"}))
        mock_response = MagicMock(status_code=200)
        with patch("httpx.AsyncClient.post", new_callable=AsyncMock, return_value=mock_response) as mock_post:
            await sink.submit(_record())

        args, kwargs = mock_post.call_args
        assert args[0] == "https://forms.example.org/submit"
        assert kwargs["data"]["area"] == "Hatfield"
        assert kwargs["data"]["gps_pin"] == "-25.746000, 28.231000"

    async def test_response_status_not_inspected(self) -> None:
        sink = FormSubmissionSink("https://forms.example.org/submit")
        mock_response = MagicMock(status_code=500)
        with patch("httpx.AsyncClient.post", new_callable=AsyncMock, return_value=mock_response):
            await sink.submit(_record())

    async def test_timeout_raises_submission_error(self) -> None:
        sink = FormSubmissionSink("https://forms.example.org/submit", timeout=0.1)
        with (
            patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post,
            pytest.raises(SubmissionError, match="timed out"),
        ):
            mock_post.side_effect = httpx.TimeoutException("timed out")
            await sink.submit(_record())

    async def test_connection_error_raises_submission_error(self) -> None:
        sink = FormSubmissionSink("https://forms.example.org/submit")
        with (
            patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post,
            pytest.raises(SubmissionError, match="Submission failed"),
        ):
            mock_post.side_effect = httpx.ConnectError("Connection refused")
            await sink.submit(_record())


class TestLogOnlySubmissionSink:
    """Tests for LogOnlySubmissionSink."""

    async def test_records_without_sending(self) -> None:
        sink = LogOnlySubmissionSink()
        with patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post:
            await sink.submit(_record())

        mock_post.assert_not_called()
        assert len(sink.records) == 1
        assert sink.records[0].gps_pin == "-25.746000, 28.231000"
