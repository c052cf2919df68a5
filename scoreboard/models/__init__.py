from scoreboard.models.mode import DEFAULT_MODE, GameMode
from scoreboard.models.team import RankedTeam, Team, default_team_name

__all__ = [
    "DEFAULT_MODE", "GameMode",
    "RankedTeam", "Team", "default_team_name",
]
