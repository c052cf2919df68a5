"""
Team records for the party scoreboard.

Five teams exist for the whole session; a team's index is its identity
and never changes.  Names are stored verbatim and only replaced by the
``"Team N"`` fallback when displayed.
"""

from __future__ import annotations

from dataclasses import dataclass

from scoreboard.config import DEFAULT_TEAM_NAME


def default_team_name(index: int) -> str:
    """Return the fallback name for the team at *index* (``"Team 1"`` for 0)."""
    return DEFAULT_TEAM_NAME.format(number=index + 1)


@dataclass
class Team:
    """One scoreboard participant.

    Properties:
        index: fixed position 0-4
        name: user-entered name, possibly empty
        score: running total, no bounds enforced
    """

    index: int
    name: str = ""
    score: float = 0.0

    @property
    def display_name(self) -> str:
        return self.name if self.name else default_team_name(self.index)

    def add(self, delta: float) -> None:
        self.score += delta

    def reset(self) -> None:
        self.score = 0.0


@dataclass(frozen=True)
class RankedTeam:
    """A leaderboard entry: a snapshot of *team* at 1-based *rank*."""

    team: Team
    rank: int

    @property
    def index(self) -> int:
        return self.team.index

    @property
    def score(self) -> float:
        return self.team.score

    @property
    def display_name(self) -> str:
        return self.team.display_name
