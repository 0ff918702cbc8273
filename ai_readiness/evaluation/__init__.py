"""Evaluation pipeline. Error types are exported here; import stages from their modules."""

from .errors import (
    EvaluationError,
    ExtractionError,
    InputError,
    MalformedModelResponseError,
    ModelCallError,
    ResponseParseError,
    SchemaValidationError,
    UnsupportedFileTypeError,
)

__all__ = [
    "EvaluationError",
    "ExtractionError",
    "InputError",
    "MalformedModelResponseError",
    "ModelCallError",
    "ResponseParseError",
    "SchemaValidationError",
    "UnsupportedFileTypeError",
]
