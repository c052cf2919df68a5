"""
Tests for the pure helpers: score formatting, ranking and badges.
"""

import pytest

from scoreboard.config import COLOR_BRONZE, COLOR_GOLD, COLOR_PLAIN, COLOR_SILVER
from scoreboard.models.team import Team
from scoreboard.utils.functions import (
    BadgeSymbol,
    BadgeTier,
    UNKNOWN_BADGE,
    format_score,
    increment_label,
    rank_badge,
    rank_teams,
)


# ── Score formatting ────────────────────────────────────────────────────────


class TestFormatScore:
    @pytest.mark.parametrize("score,expected", [
        (7.0, "7"),
        (7.5, "7.5"),
        (0.0, "0"),
        (12, "12"),
        (0.5, "0.5"),
        (103.5, "103.5"),
        (-3.0, "-3"),
        (-2.5, "-2.5"),
    ])
    def test_formats(self, score, expected):
        assert format_score(score) == expected

    def test_negative_zero(self):
        assert format_score(-0.0) == "0"

    def test_one_decimal_only(self):
        assert format_score(1.25) in ("1.2", "1.3")
        assert len(format_score(1.25).split(".")[1]) == 1

    def test_no_thousands_separator(self):
        assert format_score(12345.0) == "12345"


class TestIncrementLabel:
    def test_labels(self):
        assert increment_label(3.0) == "+3"
        assert increment_label(0.5) == "+0.5"
        assert increment_label(4) == "+4"


# ── Ranking ─────────────────────────────────────────────────────────────────


class TestRankTeams:
    def _teams(self, scores):
        return [Team(index=i, score=s) for i, s in enumerate(scores)]

    def test_descending(self):
        ranked = rank_teams(self._teams([1, 5, 3, 0, 2]))
        assert [r.index for r in ranked] == [1, 2, 4, 0, 3]

    def test_stable_on_ties(self):
        ranked = rank_teams(self._teams([2, 2, 2, 2, 2]))
        assert [r.index for r in ranked] == [0, 1, 2, 3, 4]

    def test_ranks_are_positions(self):
        ranked = rank_teams(self._teams([0, 0, 9, 9, 1]))
        assert [(r.index, r.rank) for r in ranked] == [
            (2, 1), (3, 2), (4, 3), (0, 4), (1, 5),
        ]

    def test_copies_teams(self):
        teams = self._teams([1, 2, 3, 4, 5])
        ranked = rank_teams(teams)
        assert ranked[0].team is not teams[4]
        assert ranked[0].team == teams[4]

    def test_empty(self):
        assert rank_teams([]) == []


# ── Badges ──────────────────────────────────────────────────────────────────


class TestRankBadge:
    def test_first_is_gold_crown(self):
        badge = rank_badge(1)
        assert badge.symbol == BadgeSymbol.CROWN
        assert badge.tier == BadgeTier.GOLD
        assert badge.color == COLOR_GOLD

    def test_second_and_third_share_medal(self):
        assert rank_badge(2).symbol == rank_badge(3).symbol == BadgeSymbol.MEDAL
        assert rank_badge(2).color == COLOR_SILVER
        assert rank_badge(3).color == COLOR_BRONZE

    def test_fourth_and_fifth_numbered(self):
        assert rank_badge(4).symbol == BadgeSymbol.NUMBER_4
        assert rank_badge(5).symbol == BadgeSymbol.NUMBER_5
        assert rank_badge(4).tier == rank_badge(5).tier == BadgeTier.PLAIN
        assert rank_badge(5).color == COLOR_PLAIN

    @pytest.mark.parametrize("rank", [0, -1, 6, 42])
    def test_out_of_range_is_unknown(self, rank):
        badge = rank_badge(rank)
        assert badge == UNKNOWN_BADGE
        assert badge.symbol == BadgeSymbol.UNKNOWN
        assert badge.tier == BadgeTier.UNKNOWN
