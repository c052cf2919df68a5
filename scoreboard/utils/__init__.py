"""Utility functions and helpers."""

from .functions import (
    Badge,
    BadgeSymbol,
    BadgeTier,
    UNKNOWN_BADGE,
    format_score,
    increment_label,
    rank_badge,
    rank_teams,
)
from .input_handler import InputEvent, ScoreAction, apply_event

__all__ = [
    "Badge",
    "BadgeSymbol",
    "BadgeTier",
    "UNKNOWN_BADGE",
    "format_score",
    "increment_label",
    "rank_badge",
    "rank_teams",
    "InputEvent",
    "ScoreAction",
    "apply_event",
]
