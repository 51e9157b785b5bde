"""Unit tests for logging configuration."""

import json
import sys
from pathlib import Path

import pytest
from loguru import logger

from ward_checker.core.logging import APP_LOG_FILE, SUBMISSION_LOG_FILE, setup_logging


@pytest.fixture(autouse=True)
def restore_default_sink():
    yield
    logger.remove()
    logger.configure(extra={})
    logger.add(sys.stderr)


class TestLogging:
    """Tests for Loguru logging setup."""

    def test_setup_logging_does_not_raise(self) -> None:
        """setup_logging with valid log level does not raise."""
        setup_logging("DEBUG")
        setup_logging("INFO", ward_id="44")
        setup_logging("WARNING")

    def test_setup_logging_case_insensitive(self) -> None:
        """setup_logging accepts case-insensitive log levels."""
        setup_logging("info")
        setup_logging("debug")

    def test_app_log_carries_ward(self, tmp_path: Path) -> None:
        setup_logging("INFO", str(tmp_path), ward_id="44")

        logger.info("Boundary loaded")
        logger.remove()

        line = (tmp_path / APP_LOG_FILE).read_text().strip()
        assert "| ward 44 |" in line
        assert line.endswith("Boundary loaded")

    def test_submission_records_go_to_audit_file(self, tmp_path: Path) -> None:
        setup_logging("INFO", str(tmp_path), ward_id="44")

        logger.info("Geocode attempt 1/6")
        logger.bind(json_output=True).info("Submission (not sent): eligibility=inside", payload={"suburb": "Hatfield"})
        logger.remove()

        lines = (tmp_path / SUBMISSION_LOG_FILE).read_text().splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])["record"]
        assert record["message"] == "Submission (not sent): eligibility=inside"
        assert record["extra"]["payload"] == {"suburb": "Hatfield"}
        assert record["extra"]["ward"] == "44"

    def test_no_files_without_log_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        setup_logging("INFO")

        logger.bind(json_output=True).info("Submission (not sent)")

        assert list(tmp_path.iterdir()) == []
