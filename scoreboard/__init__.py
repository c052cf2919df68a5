"""
Party Scoreboard - five-team score tracker for in-person party games
"""

__version__ = "1.0.0"

from .models.mode import GameMode
from .state import Change, ChangeKind, ScoreState
from .utils.functions import format_score, rank_badge

__all__ = [
    "Change",
    "ChangeKind",
    "GameMode",
    "ScoreState",
    "format_score",
    "rank_badge",
]
