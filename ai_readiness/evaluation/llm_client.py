"""Hosted model access through any OpenAI-compatible chat completions API."""

from typing import Optional

import httpx
from openai import AsyncOpenAI

from config import (
    LLM_TEMPERATURE,
    LLM_TIMEOUT_SECONDS,
    MODEL_NAME,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
)
from evaluation.errors import MalformedModelResponseError, ModelCallError
from utils.logger import get_logger

logger = get_logger(__name__)


def create_client(api_key: Optional[str] = None, base_url: Optional[str] = None) -> AsyncOpenAI:
    """Build the async client. No retries: failures surface immediately."""
    key = api_key if api_key is not None else OPENAI_API_KEY
    if not key:
        logger.error("OPENAI_API_KEY is not set; cannot call the model")
        raise ModelCallError("Model call failed", debug={"message": "OPENAI_API_KEY is not set"})
    return AsyncOpenAI(
        api_key=key,
        base_url=(base_url if base_url is not None else OPENAI_BASE_URL) or None,
        timeout=httpx.Timeout(LLM_TIMEOUT_SECONDS, connect=10.0),
        max_retries=0,
    )


async def generate_evaluation_text(
    client: AsyncOpenAI,
    system_prompt: str,
    user_prompt: str,
    model: str = MODEL_NAME,
) -> str:
    """Send one chat completion and return the reply text."""
    logger.debug(
        "Calling model=%s system_prompt_len=%s user_prompt_len=%s",
        model,
        len(system_prompt),
        len(user_prompt),
    )
    try:
        response = await client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=LLM_TEMPERATURE,
        )
    except Exception as e:
        logger.exception("Model call failed: %s", e)
        raise ModelCallError(
            "Model call failed",
            debug={
                "name": type(e).__name__,
                "message": str(e),
                "code": getattr(e, "code", None) or getattr(e, "status_code", None),
            },
        ) from e

    choice = response.choices[0] if getattr(response, "choices", None) else None
    if not choice or not choice.message or not choice.message.content:
        logger.error("Malformed model response: %s", str(response)[:200])
        raise MalformedModelResponseError(
            "Malformed response from model",
            debug={"response": str(response)[:200]},
        )
    text = choice.message.content
    logger.debug("Model reply length=%s", len(text))
    return text
