"""
UI text utilities for the party scoreboard.

Builds the strings the presentation draws (captions, button labels,
leaderboard rows) and tracks the team-name field being edited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from scoreboard.config import MAX_NAME_LENGTH, TEAM_CAPTION
from scoreboard.utils.functions import Badge, format_score, rank_badge
from scoreboard.utils.input_handler import InputEvent, ScoreAction

if TYPE_CHECKING:
    from scoreboard.state import ScoreState


def team_caption(team_index: int) -> str:
    """Small caption under a name field, e.g. ``"TEAM 1"``."""
    return TEAM_CAPTION.format(number=team_index + 1).upper()


@dataclass(frozen=True)
class LeaderboardRow:
    rank: int
    badge: Badge
    name: str
    score_text: str


def leaderboard_rows(state: ScoreState) -> list[LeaderboardRow]:
    """Return one display row per team in current ranking order."""
    return [
        LeaderboardRow(
            rank=entry.rank,
            badge=rank_badge(entry.rank),
            name=entry.display_name,
            score_text=format_score(entry.score),
        )
        for entry in state.rankings()
    ]


@dataclass
class NameEditor:
    """Text-entry state for the focused team-name field.

    Every edit yields a RENAME event so the stored name follows the
    field keystroke by keystroke.
    """

    team_index: Optional[int] = None
    text: str = ""
    max_length: int = MAX_NAME_LENGTH

    @property
    def active(self) -> bool:
        return self.team_index is not None

    def begin(self, team_index: int, current_name: str) -> None:
        self.team_index = team_index
        self.text = current_name

    def finish(self) -> None:
        self.team_index = None
        self.text = ""

    def insert(self, chars: str) -> Optional[InputEvent]:
        """Append printable *chars*, truncated to *max_length*."""
        if not self.active:
            return None
        printable = "".join(c for c in chars if c.isprintable())
        if not printable:
            return None
        room = self.max_length - len(self.text)
        if room <= 0:
            return None
        self.text += printable[:room]
        return self._rename()

    def backspace(self) -> Optional[InputEvent]:
        if not self.active or not self.text:
            return None
        self.text = self.text[:-1]
        return self._rename()

    def _rename(self) -> InputEvent:
        return InputEvent(
            ScoreAction.RENAME, team_index=self.team_index, name=self.text,
        )
