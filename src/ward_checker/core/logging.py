"""Loguru logging configuration for the checker.

Every line carries the target ward. Records bound with ``json_output=True``
(one per reported automatic check) are also emitted as JSON, and when a
``log_dir`` is set they are kept in their own ``submissions.jsonl`` audit
file next to the rotating application log.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | ward {extra[ward]} | {name}:{function}:{line} | {message}"

APP_LOG_FILE = "ward-checker.log"
SUBMISSION_LOG_FILE = "submissions.jsonl"


def _is_submission_record(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def setup_logging(log_level: str = "INFO", log_dir: str | None = None, ward_id: str = "-") -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Minimum log level to emit.
        log_dir: Optional directory for log files. When set, the application
            log rotates every 24 hours (kept 7 days) and the submission audit
            file rotates monthly (kept a year).
        ward_id: Target ward shown on every line.
    """
    level = log_level.upper()
    logger.remove()
    logger.configure(extra={"ward": ward_id})
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, serialize=False)
    logger.add(sys.stderr, level=level, serialize=True, filter=_is_submission_record)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / APP_LOG_FILE,
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
        logger.add(
            log_path / SUBMISSION_LOG_FILE,
            level="INFO",
            serialize=True,
            filter=_is_submission_record,
            rotation="1 month",
            retention="1 year",
        )
