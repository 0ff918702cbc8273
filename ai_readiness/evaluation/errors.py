"""Error taxonomy for the evaluation pipeline.

Input and extraction problems map to HTTP 400; anything that goes wrong
downstream of a valid request (model call, reply parsing, schema validation)
maps to HTTP 500 and carries diagnostic detail in ``debug``.
"""

from typing import Any, Optional


class EvaluationError(Exception):
    """Base error: human-readable message, HTTP status, optional debug payload."""

    status_code: int = 500

    def __init__(self, message: str, debug: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.debug = debug

    def to_response(self) -> dict:
        """Error body as sent to clients; ``debug`` only when present."""
        body: dict = {"error": self.message}
        if self.debug is not None:
            body["debug"] = self.debug
        return body


class InputError(EvaluationError):
    """Missing/invalid role, missing content, content too short, upload too large."""

    status_code = 400


class UnsupportedFileTypeError(InputError):
    """Uploaded file is not PDF, DOCX or plain text."""


class ExtractionError(EvaluationError):
    """Supported file type, but the parser could not read it."""

    status_code = 400


class ModelCallError(EvaluationError):
    """The hosted model could not be reached or rejected the request."""


class MalformedModelResponseError(EvaluationError):
    """Model replied without any usable text."""


class ResponseParseError(EvaluationError):
    """Model text is not valid JSON after cleanup."""


class SchemaValidationError(EvaluationError):
    """Model JSON does not match the EvaluationResult schema."""
