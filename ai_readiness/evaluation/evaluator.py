"""Evaluation pipeline: prepare the request, call the model, validate the reply."""

import asyncio
from typing import Optional

from openai import AsyncOpenAI

from config import MAX_UPLOAD_BYTES, MIN_CV_CHARS, SCORE_CHECK_MODE, SCORE_CHECK_TOLERANCE
from cv_pipeline.text_extractor import clean_cv_text, extract_text_from_file
from evaluation.errors import InputError, SchemaValidationError
from evaluation.llm_client import create_client, generate_evaluation_text
from evaluation.prompts import build_system_prompt, build_user_prompt
from evaluation.response_parser import parse_model_json, score_discrepancies, validate_evaluation
from schemas.evaluation import ROLE_VALUES, EvaluationRequest, EvaluationResult
from utils.logger import get_logger

logger = get_logger(__name__)


def prepare_request(
    role: Optional[str],
    file_bytes: Optional[bytes] = None,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    text: Optional[str] = None,
) -> EvaluationRequest:
    """
    Resolve CV content from an upload (preferred) or pasted text and check it.
    Raises InputError / ExtractionError with a user-facing message.
    """
    if file_bytes is not None:
        if len(file_bytes) > MAX_UPLOAD_BYTES:
            raise InputError(f"File too large. Maximum size is {MAX_UPLOAD_BYTES // (1024 * 1024)} MB.")
        cv_content = extract_text_from_file(file_bytes, filename, content_type)
    elif text:
        logger.debug("Using pasted text content, length=%s", len(text))
        cv_content = clean_cv_text(text)
    else:
        logger.error("No file or text content provided")
        raise InputError("No CV content provided")

    if len(cv_content) < MIN_CV_CHARS:
        raise InputError("CV content too short. Please provide a complete CV.")

    if role not in ROLE_VALUES:
        raise InputError("Please select a valid role: data_science or digital_marketing")

    return EvaluationRequest(role=role, cv_text=cv_content)


def _check_scores(result: EvaluationResult) -> None:
    if SCORE_CHECK_MODE == "off":
        return
    issues = score_discrepancies(result, SCORE_CHECK_TOLERANCE)
    if not issues:
        return
    if SCORE_CHECK_MODE == "strict":
        raise SchemaValidationError(
            "Model scores are internally inconsistent",
            debug={"discrepancies": issues},
        )
    for issue in issues:
        logger.warning("Score discrepancy: %s", issue)


async def evaluate_cv(request: EvaluationRequest, client: AsyncOpenAI) -> EvaluationResult:
    """Run one evaluation against the hosted model and return the validated result."""
    logger.info("Evaluating CV: role=%s length=%s", request.role, len(request.cv_text))
    text = await generate_evaluation_text(
        client,
        build_system_prompt(request.role),
        build_user_prompt(request.cv_text),
    )
    data = parse_model_json(text)
    result = validate_evaluation(data)
    _check_scores(result)
    logger.info(
        "Evaluation complete: role=%s overall=%s penalty=%s",
        result.function,
        result.overall_score,
        result.risk_penalty_applied,
    )
    return result


def run_evaluation(request: EvaluationRequest, client: Optional[AsyncOpenAI] = None) -> EvaluationResult:
    """
    Synchronous wrapper around evaluate_cv.
    Uses its own event loop; safe to call from sync context (e.g. Streamlit).
    """
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        if client is not None:
            return loop.run_until_complete(evaluate_cv(request, client))
        return loop.run_until_complete(_evaluate_with_own_client(request))
    finally:
        loop.close()


async def _evaluate_with_own_client(request: EvaluationRequest) -> EvaluationResult:
    client = create_client()
    try:
        return await evaluate_cv(request, client)
    finally:
        await client.close()
