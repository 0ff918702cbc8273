"""Turn raw model text into a validated EvaluationResult."""

import json
from typing import Any, List

from pydantic import ValidationError

from config import RISK_PENALTY_POINTS
from evaluation.errors import ResponseParseError, SchemaValidationError
from schemas.evaluation import EvaluationResult
from utils.logger import get_logger

logger = get_logger(__name__)


def clean_model_text(text: str) -> str:
    """Strip markdown code fences wherever the model put them."""
    return (text or "").replace("```json", "").replace("```", "").strip()


def parse_model_json(text: str) -> Any:
    """Parse JSON from model reply after removing code fences."""
    cleaned = clean_model_text(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse model reply as JSON: %s", e)
        raise ResponseParseError(
            "Failed to parse model response as JSON",
            debug={
                "message": str(e),
                "responseLength": len(text or ""),
                "responseSample": (text or "")[:300],
            },
        ) from e


def _first_error(e: ValidationError) -> dict:
    err = e.errors(include_url=False)[0]
    return {
        "loc": [str(p) for p in err.get("loc", ())],
        "msg": err.get("msg"),
        "type": err.get("type"),
    }


def validate_evaluation(data: Any) -> EvaluationResult:
    """Validate parsed JSON against the EvaluationResult schema."""
    try:
        return EvaluationResult.model_validate(data)
    except ValidationError as e:
        received_keys = list(data.keys()) if isinstance(data, dict) else []
        logger.error("Schema validation failed (%s errors); keys=%s", e.error_count(), received_keys)
        raise SchemaValidationError(
            "Model output does not match expected schema",
            debug={
                "message": str(e),
                "firstError": _first_error(e),
                "receivedKeys": received_keys,
            },
        ) from e


def score_discrepancies(result: EvaluationResult, tolerance: float = 1.0) -> List[str]:
    """
    Recompute weighted scores and the overall score from the parameters.
    Returns one message per value that differs from the model's by more than tolerance.
    """
    issues = []
    total = 0.0
    for param in result.parameters:
        expected = param.weight * param.score / 100
        total += expected
        if abs(expected - param.weighted_score) > tolerance:
            issues.append(
                f"{param.name}: weightedScore {param.weighted_score:g} != "
                f"weight {param.weight:g} x score {param.score:g} / 100 = {expected:g}"
            )
    if result.risk_penalty_applied:
        total -= RISK_PENALTY_POINTS
    total = max(0.0, total)
    if abs(total - result.overall_score) > tolerance:
        issues.append(f"overallScore {result.overall_score:g} != recomputed {total:g}")
    return issues
