"""
Shared pure helpers for the party scoreboard.

Score formatting, ranking derivation and the rank-to-badge table used by
the leaderboard.  Nothing here touches pygame or mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable

from scoreboard.config import COLOR_BRONZE, COLOR_GOLD, COLOR_PLAIN, COLOR_SILVER
from scoreboard.models.team import RankedTeam, Team


# ── Score formatting ────────────────────────────────────────────────────────


def format_score(score: float) -> str:
    """Format *score* with no decimals when whole, otherwise one decimal.

    ``7.0`` -> ``"7"``, ``7.5`` -> ``"7.5"``.  Independent of locale.
    """
    value = float(score) + 0.0  # folds -0.0 into 0.0
    if value % 1 == 0:
        return f"{value:.0f}"
    return f"{value:.1f}"


def increment_label(delta: float) -> str:
    """Button caption for an increment, e.g. ``"+3"`` or ``"+0.5"``."""
    return f"+{format_score(delta)}"


# ── Ranking ─────────────────────────────────────────────────────────────────


def rank_teams(teams: Iterable[Team]) -> list[RankedTeam]:
    """Order *teams* by score descending and number them from 1.

    ``sorted`` is stable, so tied teams keep their input order.  Each
    entry holds a copy of its team.
    """
    ordered = sorted(teams, key=lambda team: team.score, reverse=True)
    return [
        RankedTeam(team=replace(team), rank=position)
        for position, team in enumerate(ordered, start=1)
    ]


# ── Badges ──────────────────────────────────────────────────────────────────


class BadgeSymbol(Enum):
    CROWN = auto()
    MEDAL = auto()
    NUMBER_4 = auto()
    NUMBER_5 = auto()
    UNKNOWN = auto()


class BadgeTier(Enum):
    GOLD = auto()
    SILVER = auto()
    BRONZE = auto()
    PLAIN = auto()
    UNKNOWN = auto()


TIER_COLORS: dict[BadgeTier, tuple[int, int, int]] = {
    BadgeTier.GOLD: COLOR_GOLD,
    BadgeTier.SILVER: COLOR_SILVER,
    BadgeTier.BRONZE: COLOR_BRONZE,
    BadgeTier.PLAIN: COLOR_PLAIN,
    BadgeTier.UNKNOWN: COLOR_PLAIN,
}


@dataclass(frozen=True)
class Badge:
    symbol: BadgeSymbol
    tier: BadgeTier

    @property
    def color(self) -> tuple[int, int, int]:
        return TIER_COLORS[self.tier]


# Ranks 2 and 3 share the medal symbol and differ only in tier.
_BADGES: dict[int, Badge] = {
    1: Badge(BadgeSymbol.CROWN, BadgeTier.GOLD),
    2: Badge(BadgeSymbol.MEDAL, BadgeTier.SILVER),
    3: Badge(BadgeSymbol.MEDAL, BadgeTier.BRONZE),
    4: Badge(BadgeSymbol.NUMBER_4, BadgeTier.PLAIN),
    5: Badge(BadgeSymbol.NUMBER_5, BadgeTier.PLAIN),
}

UNKNOWN_BADGE: Badge = Badge(BadgeSymbol.UNKNOWN, BadgeTier.UNKNOWN)


def rank_badge(rank: int) -> Badge:
    """Return the leaderboard badge for a 1-based *rank*.

    Defined for every integer; ranks outside 1-5 get ``UNKNOWN_BADGE``.
    """
    return _BADGES.get(rank, UNKNOWN_BADGE)
