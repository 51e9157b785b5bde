"""Form-post submission sink and its log-only counterpart."""

import httpx
from loguru import logger

from ward_checker.lib.submission.base import BaseSubmissionSink, FieldMapping, SubmissionError, SubmissionRecord

DEFAULT_TIMEOUT = 10.0


class FormSubmissionSink(BaseSubmissionSink):
    """POST each record as a url-encoded form to a fixed destination.

    The response is not inspected: any answer from the server counts as
    delivered. Only transport failures raise.
    """

    def __init__(self, url: str, fields: FieldMapping | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._url = url
        self._fields = fields or FieldMapping()
        self._timeout = timeout

    async def submit(self, record: SubmissionRecord) -> None:
        payload = self._fields.apply(record)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self._url, data=payload)
        except httpx.TimeoutException as e:
            logger.error("Form submission timed out")
            raise SubmissionError("Submission request timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Form submission error: {e}")
            raise SubmissionError(f"Submission failed: {e}") from e

        logger.bind(json_output=True).info(
            f"Form submission sent (HTTP {response.status_code}): eligibility={record.eligibility}",
            payload=payload,
        )


class LogOnlySubmissionSink(BaseSubmissionSink):
    """Record submissions in the log instead of sending them anywhere."""

    def __init__(self, fields: FieldMapping | None = None) -> None:
        self._fields = fields or FieldMapping()
        self.records: list[SubmissionRecord] = []

    async def submit(self, record: SubmissionRecord) -> None:
        self.records.append(record)
        logger.bind(json_output=True).info(
            f"Submission (not sent): eligibility={record.eligibility}",
            payload=self._fields.apply(record),
        )
