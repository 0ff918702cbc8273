"""Utility exports."""

from .helpers import format_score, indicator_badges, role_label, score_label, score_tone
from .logger import get_logger

__all__ = [
    "get_logger",
    "format_score",
    "indicator_badges",
    "role_label",
    "score_label",
    "score_tone",
]
