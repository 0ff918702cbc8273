"""Schema exports."""

from .evaluation import (
    ROLE_VALUES,
    ErrorResponse,
    EvaluationRequest,
    EvaluationResult,
    ExperienceLevel,
    ParameterScore,
    Role,
)

__all__ = [
    "ROLE_VALUES",
    "ErrorResponse",
    "EvaluationRequest",
    "EvaluationResult",
    "ExperienceLevel",
    "ParameterScore",
    "Role",
]
