"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
# Any OpenAI-compatible host (e.g. Gemini's compatibility endpoint); empty means api.openai.com
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.2"))
LLM_TIMEOUT_SECONDS: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "90"))

# CV content limits
MIN_CV_CHARS: int = 100
MAX_CV_CHARS: int = int(os.getenv("MAX_CV_CHARS", "50000"))
MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

# Score consistency check: "warn" logs, "strict" rejects, "off" skips
SCORE_CHECK_MODE: str = os.getenv("SCORE_CHECK_MODE", "warn").strip().lower()
SCORE_CHECK_TOLERANCE: float = float(os.getenv("SCORE_CHECK_TOLERANCE", "1.0"))
RISK_PENALTY_POINTS: int = 20

# HTTP API
CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:8501,http://localhost:3000")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Centralized role catalogue (drives the prompt labels, UI cards and evaluation matrix).
# Weights here must match the rule blocks in evaluation/prompts.py.
AVAILABLE_ROLES: dict = {
    "data_science": {
        "label": "Data Science",
        "matrix_title": "Data Science & Analytics",
        "description": "ML, AI tools, deployment",
        "parameters": [
            {
                "name": "Modern Tool Stack",
                "weight": 40,
                "blurb": "Transformers, LangChain, Vector DBs, MLOps vs Legacy tools",
            },
            {
                "name": "Deployment & Application",
                "weight": 60,
                "blurb": "Production APIs, business impact vs isolated modeling",
            },
        ],
    },
    "digital_marketing": {
        "label": "Digital Marketing",
        "matrix_title": "Digital Marketing",
        "description": "SEO, automation, campaigns",
        "parameters": [
            {
                "name": "AI-Augmented Workflow",
                "weight": 50,
                "blurb": "Programmatic SEO, automation, GenAI vs manual processes",
            },
            {
                "name": "Outcome Density / ROI",
                "weight": 50,
                "blurb": "CAC, LTV, ROAS, revenue attribution vs vanity metrics",
            },
        ],
    },
}
