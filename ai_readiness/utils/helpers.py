"""Helper utilities for presenting evaluation results."""

from typing import List

from config import AVAILABLE_ROLES


def score_label(score: float) -> str:
    """Readiness band for an overall score."""
    if score >= 80:
        return "Excellent"
    if score >= 70:
        return "Good"
    if score >= 50:
        return "Moderate"
    if score >= 30:
        return "Developing"
    return "Low"


def score_tone(score: float) -> str:
    """Streamlit alert tone for a score: success, warning or error."""
    if score >= 70:
        return "success"
    if score >= 40:
        return "warning"
    return "error"


def format_score(value: float) -> str:
    """Whole numbers without decimals, everything else to one decimal."""
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.1f}"


def role_label(role: str) -> str:
    """Display label for a role key (falls back to a title-cased key)."""
    entry = AVAILABLE_ROLES.get(role)
    if entry:
        return entry["label"]
    return role.replace("_", " ").title()


def indicator_badges(indicators: List[str], limit: int = 12) -> str:
    """Markdown inline-code badges for non-empty indicator strings."""
    return " ".join(f"`{s.strip()}`" for s in indicators[:limit] if s and s.strip())
