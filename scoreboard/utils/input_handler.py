"""
Input handler for the party scoreboard.

Maps user gestures (button presses, picker selection, text edits) to
``ScoreState`` mutations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from scoreboard.models.mode import GameMode

if TYPE_CHECKING:
    from scoreboard.state import ScoreState


class ScoreAction(Enum):
    """Actions the user can trigger."""
    ADD_SCORE = auto()
    RESET_TEAM = auto()
    RESET_ALL = auto()
    NEXT_MODE = auto()
    SET_MODE = auto()
    RENAME = auto()
    FOCUS_NAME = auto()
    QUIT = auto()
    NONE = auto()


@dataclass(frozen=True)
class InputEvent:
    """Abstract input event consumed by the application loop."""
    action: ScoreAction
    team_index: int = 0
    delta: float = 0.0
    name: str = ""
    mode: Optional[GameMode] = None


def apply_event(state: ScoreState, event: InputEvent) -> bool:
    """Apply *event* to *state*.

    Returns True if the event mutated the state.  Focus, quit and no-op
    events belong to the presentation and are ignored here.
    """
    action = event.action
    if action == ScoreAction.ADD_SCORE:
        state.add_to_score(event.team_index, event.delta)
    elif action == ScoreAction.RESET_TEAM:
        state.reset_score(event.team_index)
    elif action == ScoreAction.RESET_ALL:
        state.reset_all_scores()
    elif action == ScoreAction.NEXT_MODE:
        state.set_mode(state.mode.next())
    elif action == ScoreAction.SET_MODE:
        if event.mode is None:
            raise ValueError("SET_MODE event requires a mode")
        state.set_mode(event.mode)
    elif action == ScoreAction.RENAME:
        state.set_team_name(event.team_index, event.name)
    else:
        return False
    return True
