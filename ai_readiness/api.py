"""
AI Readiness Score – HTTP API.
POST /api/evaluate takes multipart form data (cv file or text, plus role) and
returns the validated evaluation or an {error, debug?} body.
"""

from typing import Callable, Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from openai import AsyncOpenAI

from config import AVAILABLE_ROLES, CORS_ORIGINS
from evaluation.errors import EvaluationError
from evaluation.evaluator import evaluate_cv, prepare_request
from evaluation.llm_client import create_client
from utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="AI Readiness Score API",
    description="Score a CV's AI readiness for data science or digital marketing roles.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EvaluationError)
async def evaluation_error_handler(request: Request, exc: EvaluationError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def form_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed form fields are input errors: 400 with {error, debug}, not FastAPI's 422."""
    errors = [
        {"loc": [str(p) for p in err.get("loc", ())], "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.warning("%s %s -> 400: invalid form data %s", request.method, request.url.path, errors)
    if any("cv" in err["loc"] for err in errors):
        message = "Failed to read file content."
    else:
        message = "Invalid form data."
    return JSONResponse(status_code=400, content={"error": message, "debug": errors})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to evaluate CV. Please try again.", "debug": str(exc)},
    )


def get_client_factory() -> Callable[[], AsyncOpenAI]:
    """Model client factory dependency (overridable in tests)."""
    return create_client


@app.get("/health")
async def health_check():
    """Health check endpoint for load balancer"""
    return {"status": "healthy"}


@app.get("/api/roles")
async def list_roles():
    """Role catalogue with weighted parameters (evaluation matrix)."""
    return [{"key": key, **role} for key, role in AVAILABLE_ROLES.items()]


@app.post("/api/evaluate")
async def evaluate(
    cv: Optional[UploadFile] = File(None),
    text: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    client_factory: Callable[[], AsyncOpenAI] = Depends(get_client_factory),
):
    """Evaluate one CV (uploaded file takes precedence over pasted text)."""
    file_bytes = None
    filename = None
    content_type = None
    if cv is not None and cv.filename:
        file_bytes = await cv.read()
        filename = cv.filename
        content_type = cv.content_type
        logger.debug("Received file %s type=%s size=%s", filename, content_type, len(file_bytes))

    request = prepare_request(
        role,
        file_bytes=file_bytes,
        filename=filename,
        content_type=content_type,
        text=text,
    )
    # Client is built only once the input is valid, so input errors never need an API key
    client = client_factory()
    try:
        result = await evaluate_cv(request, client)
    finally:
        await client.close()
    return result.to_wire()
