"""
Core scoreboard state.

Owns the five team records and the selected game mode, applies every
score and name mutation, and derives the leaderboard on demand.
Subscribers are notified once after each mutation has fully completed,
so a redraw never sees a half-updated team list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

from scoreboard.config import NUM_TEAMS
from scoreboard.models.mode import DEFAULT_MODE, GameMode
from scoreboard.models.team import RankedTeam, Team
from scoreboard.utils.functions import rank_teams


# ── Change notifications ────────────────────────────────────────────────────


class ChangeKind(Enum):
    MODE = auto()
    SCORE_ADDED = auto()
    SCORE_RESET = auto()
    ALL_RESET = auto()
    NAME = auto()


@dataclass(frozen=True)
class Change:
    """What the last mutation touched.  *team_index* is None for global changes."""
    kind: ChangeKind
    team_index: Optional[int] = None


Observer = Callable[["ScoreState", Change], None]


# ── Score state ─────────────────────────────────────────────────────────────


@dataclass
class ScoreState:
    """Single source of truth for scores, names and the game mode.

    Team indices outside ``0..NUM_TEAMS-1`` are a caller error and raise
    ``IndexError``; negative indices are not wrapped.
    """

    mode: GameMode = DEFAULT_MODE
    teams: list[Team] = field(default_factory=list)

    _observers: list[Observer] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.mode, GameMode):
            raise TypeError(f"expected GameMode, got {type(self.mode).__name__}")
        if not self.teams:
            self._init_teams()
        if len(self.teams) != NUM_TEAMS:
            raise ValueError(
                f"expected {NUM_TEAMS} teams, got {len(self.teams)}"
            )
        # teams[i] must be the only record with index i
        if [t.index for t in self.teams] != list(range(NUM_TEAMS)):
            raise ValueError("teams must be ordered by index 0..4")
        if len({id(t) for t in self.teams}) != NUM_TEAMS:
            raise ValueError("teams must be distinct records")

    def _init_teams(self) -> None:
        for i in range(NUM_TEAMS):
            self.teams.append(Team(index=i))

    # ── Observers ───────────────────────────────────────────────────────

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register *observer* and return a callable that removes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, change: Change) -> None:
        for observer in tuple(self._observers):
            observer(self, change)

    # ── Queries ─────────────────────────────────────────────────────────

    def team(self, team_index: int) -> Team:
        """Return the live record for *team_index*."""
        if not 0 <= team_index < NUM_TEAMS:
            raise IndexError(
                f"team index {team_index} out of range 0..{NUM_TEAMS - 1}"
            )
        return self.teams[team_index]

    def score(self, team_index: int) -> float:
        return self.team(team_index).score

    def display_name(self, team_index: int) -> str:
        return self.team(team_index).display_name

    def permitted_increments(self) -> tuple[float, ...]:
        """Deltas the current mode offers as buttons."""
        return self.mode.increments

    def rankings(self) -> list[RankedTeam]:
        """Teams by score descending, ties in index order, ranks from 1.

        Recomputed on every call from the current scores.
        """
        return rank_teams(self.teams)

    # ── Mutations ───────────────────────────────────────────────────────

    def set_mode(self, mode: GameMode) -> None:
        """Switch the active game mode.  Existing scores are kept."""
        if not isinstance(mode, GameMode):
            raise TypeError(f"expected GameMode, got {type(mode).__name__}")
        self.mode = mode
        self._notify(Change(ChangeKind.MODE))

    def add_to_score(self, team_index: int, delta: float) -> None:
        """Add *delta* to a team's score.

        The delta is not checked against the mode; the presentation only
        offers the mode's increments.
        """
        self.team(team_index).add(delta)
        self._notify(Change(ChangeKind.SCORE_ADDED, team_index))

    def reset_score(self, team_index: int) -> None:
        self.team(team_index).reset()
        self._notify(Change(ChangeKind.SCORE_RESET, team_index))

    def reset_all_scores(self) -> None:
        """Zero every score.  Names and mode are left alone."""
        for team in self.teams:
            team.reset()
        self._notify(Change(ChangeKind.ALL_RESET))

    def set_team_name(self, team_index: int, name: str) -> None:
        """Store *name* verbatim; an empty name displays as ``"Team N"``."""
        self.team(team_index).name = name
        self._notify(Change(ChangeKind.NAME, team_index))
