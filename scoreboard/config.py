"""
Configuration constants for the party scoreboard.

Team count, per-mode increment tables, window geometry and the palette
used by the pygame presentation.
"""

# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------
NUM_TEAMS: int = 5
DEFAULT_TEAM_NAME: str = "Team {number}"  # number is index + 1
TEAM_CAPTION: str = "TEAM {number}"
NAME_PLACEHOLDER: str = "Team Name"
MAX_NAME_LENGTH: int = 24

# ---------------------------------------------------------------------------
# Scoring (button order as displayed)
# ---------------------------------------------------------------------------
TELEPHONE_PICTIONARY_INCREMENTS: tuple[float, ...] = (3.0,)
ONE_WORD_INCREMENTS: tuple[float, ...] = (4.0, 3.0, 2.0, 1.0, 0.5)

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
TITLE: str = "Score Tracker"
LEADERBOARD_TITLE: str = "Leaderboard"
SCREEN_WIDTH: int = 1280
SCREEN_HEIGHT: int = 800
MIN_SCREEN_WIDTH: int = 640
MIN_SCREEN_HEIGHT: int = 400
UPDATE_RATE: int = 60  # Hz – input polling rate

GRID_COLUMNS: int = 3
GRID_ROWS: int = 2
TOOLBAR_HEIGHT: int = 56
PADDING: int = 16
PANEL_PADDING: int = 16
BUTTON_HEIGHT: int = 44
BUTTON_SPACING: int = 8
RESET_BUTTON_SIZE: int = 32
PICKER_WIDTH: int = 240

# ---------------------------------------------------------------------------
# Fonts (pixel sizes for the default pygame font)
# ---------------------------------------------------------------------------
FONT_PATH: str = "data/fnt/Inter-Bold.ttf"
FONT_SIZE_TITLE: int = 40
FONT_SIZE_NAME: int = 32
FONT_SIZE_CAPTION: int = 18
FONT_SIZE_SCORE: int = 120
FONT_SIZE_BUTTON: int = 28
FONT_SIZE_LEADERBOARD_TITLE: int = 48
FONT_SIZE_LEADERBOARD_ROW: int = 32
FONT_SIZE_DEBUG: int = 20

# ---------------------------------------------------------------------------
# Colors (RGB)
# ---------------------------------------------------------------------------
COLOR_BACKGROUND: tuple[int, int, int] = (255, 255, 255)
COLOR_PANEL: tuple[int, int, int] = (238, 238, 240)
COLOR_TEXT: tuple[int, int, int] = (20, 20, 20)
COLOR_CAPTION: tuple[int, int, int] = (142, 142, 147)
COLOR_PLACEHOLDER: tuple[int, int, int] = (190, 190, 195)
COLOR_BUTTON: tuple[int, int, int] = (0, 122, 255)
COLOR_BUTTON_TEXT: tuple[int, int, int] = (255, 255, 255)
COLOR_FOCUS: tuple[int, int, int] = (0, 122, 255)
COLOR_DEBUG: tuple[int, int, int] = (0, 170, 0)

# Badge tiers
COLOR_GOLD: tuple[int, int, int] = (255, 204, 0)
COLOR_SILVER: tuple[int, int, int] = (142, 142, 147)
COLOR_BRONZE: tuple[int, int, int] = (162, 132, 94)
COLOR_PLAIN: tuple[int, int, int] = (176, 176, 180)  # gray at 70 % opacity
