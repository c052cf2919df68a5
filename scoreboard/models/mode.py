"""
Game modes for the party scoreboard.

A mode only decides which increment buttons each team panel offers; it
never takes part in the score arithmetic.
"""

from __future__ import annotations

from enum import Enum

from scoreboard.config import ONE_WORD_INCREMENTS, TELEPHONE_PICTIONARY_INCREMENTS


class GameMode(Enum):
    """Selectable party games (value is the picker label)."""
    TELEPHONE_PICTIONARY = "Telephone Pictionary"
    ONE_WORD = "One Word"

    @property
    def label(self) -> str:
        return self.value

    @property
    def increments(self) -> tuple[float, ...]:
        """Score deltas offered as buttons, in display order."""
        return _INCREMENTS[self]

    def next(self) -> GameMode:
        """Return the mode after this one in picker order, wrapping around."""
        modes = list(GameMode)
        return modes[(modes.index(self) + 1) % len(modes)]


_INCREMENTS: dict[GameMode, tuple[float, ...]] = {
    GameMode.TELEPHONE_PICTIONARY: TELEPHONE_PICTIONARY_INCREMENTS,
    GameMode.ONE_WORD: ONE_WORD_INCREMENTS,
}

DEFAULT_MODE: GameMode = GameMode.TELEPHONE_PICTIONARY
