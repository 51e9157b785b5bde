"""Submission library — delivers completed automatic checks to a sink.

Public API:
    - SubmissionRecord: Flat name/address/coordinate/eligibility record
    - FieldMapping: Record field -> remote form field names
    - format_gps_pin: Coordinate to 6 decimals or the not-found marker
    - BaseSubmissionSink: Abstract sink interface
    - FormSubmissionSink: Fire-and-forget url-encoded form POST
    - LogOnlySubmissionSink: Logs records instead of sending them
    - SubmissionError: Sink transport failure
"""

from ward_checker.lib.submission.base import (
    NOT_FOUND_GPS_PIN,
    BaseSubmissionSink,
    FieldMapping,
    SubmissionError,
    SubmissionRecord,
    format_gps_pin,
)
from ward_checker.lib.submission.form import FormSubmissionSink, LogOnlySubmissionSink

__all__ = [
    "NOT_FOUND_GPS_PIN",
    "BaseSubmissionSink",
    "FieldMapping",
    "FormSubmissionSink",
    "LogOnlySubmissionSink",
    "SubmissionError",
    "SubmissionRecord",
    "format_gps_pin",
]
