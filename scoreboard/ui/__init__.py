"""User interface components."""

from .audio import AudioManager, SoundEvent, sound_for_change
from .layout import Layout, TeamPanelLayout
from .text import LeaderboardRow, NameEditor, leaderboard_rows, team_caption

__all__ = [
    "AudioManager",
    "LeaderboardRow",
    "Layout",
    "NameEditor",
    "SoundEvent",
    "TeamPanelLayout",
    "leaderboard_rows",
    "sound_for_change",
    "team_caption",
]
