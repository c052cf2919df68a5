"""
Screen layout for the party scoreboard.

Splits the window into a toolbar and a three-column grid: cells 1-5 hold
the team panels, cell 6 the leaderboard.  Also resolves mouse clicks to
input events, so hit-testing works without an open display.
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from scoreboard.config import (
    BUTTON_HEIGHT,
    BUTTON_SPACING,
    FONT_SIZE_CAPTION,
    FONT_SIZE_LEADERBOARD_TITLE,
    FONT_SIZE_NAME,
    GRID_COLUMNS,
    GRID_ROWS,
    NUM_TEAMS,
    PADDING,
    PANEL_PADDING,
    PICKER_WIDTH,
    RESET_BUTTON_SIZE,
    TOOLBAR_HEIGHT,
)
from scoreboard.models.mode import GameMode
from scoreboard.utils.input_handler import InputEvent, ScoreAction

MAX_BUTTON_WIDTH: int = 140
TOOLBAR_BUTTON_SIZE: int = 40


# ── Team panel ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TeamPanelLayout:
    """Rects inside one team cell."""

    team_index: int
    panel: pygame.Rect
    name_rect: pygame.Rect
    reset_rect: pygame.Rect
    caption_rect: pygame.Rect
    score_rect: pygame.Rect
    button_row: pygame.Rect

    def buttons(self, mode: GameMode) -> list[tuple[float, pygame.Rect]]:
        """Return ``(delta, rect)`` for each increment button of *mode*.

        Buttons share the row evenly, capped in width and centred.
        """
        deltas = mode.increments
        count = len(deltas)
        row = self.button_row
        width = (row.width - BUTTON_SPACING * (count - 1)) // count
        width = max(1, min(width, MAX_BUTTON_WIDTH))
        total = width * count + BUTTON_SPACING * (count - 1)
        x = row.x + (row.width - total) // 2
        result = []
        for delta in deltas:
            result.append((delta, pygame.Rect(x, row.y, width, row.height)))
            x += width + BUTTON_SPACING
        return result


# ── Screen layout ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Layout:
    """Window geometry for a given surface size."""

    width: int
    height: int

    @property
    def toolbar_rect(self) -> pygame.Rect:
        return pygame.Rect(0, 0, self.width, TOOLBAR_HEIGHT)

    @property
    def reset_all_rect(self) -> pygame.Rect:
        return pygame.Rect(
            self.width - PADDING - TOOLBAR_BUTTON_SIZE,
            (TOOLBAR_HEIGHT - TOOLBAR_BUTTON_SIZE) // 2,
            TOOLBAR_BUTTON_SIZE,
            TOOLBAR_BUTTON_SIZE,
        )

    @property
    def picker_rect(self) -> pygame.Rect:
        reset = self.reset_all_rect
        return pygame.Rect(
            reset.x - PADDING - PICKER_WIDTH,
            reset.y,
            PICKER_WIDTH,
            TOOLBAR_BUTTON_SIZE,
        )

    @property
    def grid_rect(self) -> pygame.Rect:
        return pygame.Rect(
            PADDING,
            TOOLBAR_HEIGHT + PADDING,
            self.width - 2 * PADDING,
            self.height - TOOLBAR_HEIGHT - 2 * PADDING,
        )

    def cell_rect(self, cell: int) -> pygame.Rect:
        """Rect of grid cell *cell* (0-5, row-major)."""
        if not 0 <= cell < GRID_COLUMNS * GRID_ROWS:
            raise IndexError(f"cell {cell} out of range")
        grid = self.grid_rect
        cell_w = (grid.width - PADDING * (GRID_COLUMNS - 1)) // GRID_COLUMNS
        cell_h = (grid.height - PADDING * (GRID_ROWS - 1)) // GRID_ROWS
        col, row = cell % GRID_COLUMNS, cell // GRID_COLUMNS
        return pygame.Rect(
            grid.x + col * (cell_w + PADDING),
            grid.y + row * (cell_h + PADDING),
            cell_w,
            cell_h,
        )

    def team_panel(self, team_index: int) -> TeamPanelLayout:
        if not 0 <= team_index < NUM_TEAMS:
            raise IndexError(f"team index {team_index} out of range")
        panel = self.cell_rect(team_index)
        inner = panel.inflate(-2 * PANEL_PADDING, -2 * PANEL_PADDING)

        name_h = FONT_SIZE_NAME + 12
        name_rect = pygame.Rect(
            inner.x,
            inner.y,
            inner.width - RESET_BUTTON_SIZE - BUTTON_SPACING,
            name_h,
        )
        reset_rect = pygame.Rect(
            inner.right - RESET_BUTTON_SIZE,
            inner.y + (name_h - RESET_BUTTON_SIZE) // 2,
            RESET_BUTTON_SIZE,
            RESET_BUTTON_SIZE,
        )
        caption_rect = pygame.Rect(
            inner.x, name_rect.bottom + 4, inner.width, FONT_SIZE_CAPTION,
        )
        button_row = pygame.Rect(
            inner.x, inner.bottom - BUTTON_HEIGHT, inner.width, BUTTON_HEIGHT,
        )
        score_rect = pygame.Rect(
            inner.x,
            caption_rect.bottom,
            inner.width,
            max(0, button_row.y - BUTTON_SPACING - caption_rect.bottom),
        )
        return TeamPanelLayout(
            team_index=team_index,
            panel=panel,
            name_rect=name_rect,
            reset_rect=reset_rect,
            caption_rect=caption_rect,
            score_rect=score_rect,
            button_row=button_row,
        )

    @property
    def leaderboard_rect(self) -> pygame.Rect:
        return self.cell_rect(NUM_TEAMS)

    @property
    def leaderboard_title_rect(self) -> pygame.Rect:
        inner = self.leaderboard_rect.inflate(-2 * PANEL_PADDING, -2 * PANEL_PADDING)
        return pygame.Rect(
            inner.x, inner.y, inner.width, FONT_SIZE_LEADERBOARD_TITLE + 16,
        )

    def leaderboard_row_rect(self, position: int) -> pygame.Rect:
        """Rect of the *position*-th leaderboard row (0-based)."""
        inner = self.leaderboard_rect.inflate(-2 * PANEL_PADDING, -2 * PANEL_PADDING)
        top = self.leaderboard_title_rect.bottom
        row_h = (inner.bottom - top) // NUM_TEAMS
        return pygame.Rect(inner.x, top + position * row_h, inner.width, row_h)

    # ── Hit testing ─────────────────────────────────────────────────────

    def hit_test(self, pos: tuple[int, int], mode: GameMode) -> InputEvent:
        """Map a click at *pos* to the event of the control under it."""
        if self.reset_all_rect.collidepoint(pos):
            return InputEvent(ScoreAction.RESET_ALL)
        if self.picker_rect.collidepoint(pos):
            return InputEvent(ScoreAction.NEXT_MODE)

        for i in range(NUM_TEAMS):
            panel = self.team_panel(i)
            if not panel.panel.collidepoint(pos):
                continue
            if panel.reset_rect.collidepoint(pos):
                return InputEvent(ScoreAction.RESET_TEAM, team_index=i)
            if panel.name_rect.collidepoint(pos):
                return InputEvent(ScoreAction.FOCUS_NAME, team_index=i)
            for delta, rect in panel.buttons(mode):
                if rect.collidepoint(pos):
                    return InputEvent(
                        ScoreAction.ADD_SCORE, team_index=i, delta=delta,
                    )
            break

        return InputEvent(ScoreAction.NONE)
