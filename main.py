"""
Main entry point for the party scoreboard.

Initializes pygame, opens the scoreboard window and runs the event loop.
The window redraws only when the score state reports a change or the
window itself needs repainting.

Usage:
    python main.py [OPTIONS]

Options:
    --fullscreen         Launch in fullscreen mode
    --width N            Window width in pixels (default: 1280)
    --height N           Window height in pixels (default: 800)
    --debug              Enable debug overlay
    --mute               Disable sound feedback

Controls:
    Click a name         Edit the team name (Enter / Escape to finish)
    Click +N             Add N points to that team
    Click the arrow      Reset that team (toolbar arrow resets every team)
    Click the picker     Switch game mode
    M                    Switch game mode
    ESC                  Quit
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import pygame

from scoreboard.config import (
    COLOR_BACKGROUND,
    COLOR_BUTTON,
    COLOR_BUTTON_TEXT,
    COLOR_CAPTION,
    COLOR_DEBUG,
    COLOR_FOCUS,
    COLOR_PANEL,
    COLOR_PLACEHOLDER,
    COLOR_TEXT,
    FONT_PATH,
    FONT_SIZE_BUTTON,
    FONT_SIZE_CAPTION,
    FONT_SIZE_DEBUG,
    FONT_SIZE_LEADERBOARD_ROW,
    FONT_SIZE_LEADERBOARD_TITLE,
    FONT_SIZE_NAME,
    FONT_SIZE_SCORE,
    FONT_SIZE_TITLE,
    LEADERBOARD_TITLE,
    MIN_SCREEN_HEIGHT,
    MIN_SCREEN_WIDTH,
    NAME_PLACEHOLDER,
    NUM_TEAMS,
    PADDING,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TITLE,
    UPDATE_RATE,
)
from scoreboard.state import Change, ScoreState
from scoreboard.ui.audio import AudioManager
from scoreboard.ui.layout import Layout
from scoreboard.ui.text import NameEditor, leaderboard_rows, team_caption
from scoreboard.utils.functions import Badge, BadgeSymbol, format_score, increment_label
from scoreboard.utils.input_handler import InputEvent, ScoreAction, apply_event


# ── Constants ───────────────────────────────────────────────────────────────

FRAME_TIME: float = 1.0 / UPDATE_RATE
PANEL_RADIUS: int = 20
BUTTON_RADIUS: int = 12

_FINISH_EDIT_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE, pygame.K_TAB)


# ── Argument parsing ───────────────────────────────────────────────────────


def _dimension(minimum: int) -> Callable[[str], int]:
    def parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
        if number < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}")
        return number
    return parse


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Party scoreboard – five-team score tracker",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--width", type=_dimension(MIN_SCREEN_WIDTH), default=SCREEN_WIDTH,
        metavar="N",
        help=f"Window width (min {MIN_SCREEN_WIDTH}, default: {SCREEN_WIDTH})",
    )
    parser.add_argument(
        "--height", type=_dimension(MIN_SCREEN_HEIGHT), default=SCREEN_HEIGHT,
        metavar="N",
        help=f"Window height (min {MIN_SCREEN_HEIGHT}, default: {SCREEN_HEIGHT})",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug overlay (FPS, mode, focused field)",
    )
    parser.add_argument(
        "--mute", action="store_true",
        help="Disable sound feedback",
    )
    return parser.parse_args(argv)


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class ScoreboardApp:
    """Top-level application wrapper.

    Owns the pygame display, the score state and the main loop.  The
    state is the only source of displayed values; the app subscribes to
    it and redraws after each change.
    """

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fullscreen: bool = False
    debug: bool = False
    mute: bool = False

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    state: ScoreState = field(default_factory=ScoreState)
    layout: Optional[Layout] = None
    editor: NameEditor = field(default_factory=NameEditor)
    running: bool = False
    dirty: bool = True

    # Performance tracking
    frame_times: list[float] = field(default_factory=list)
    fps: float = 0.0

    # Audio
    audio: AudioManager = field(default_factory=AudioManager)

    _fonts: dict[int, object] = field(default_factory=dict, repr=False)
    _unsubscribers: list[Callable[[], None]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.layout is None:
            self.layout = Layout(self.width, self.height)
        self.audio.enabled = not self.mute
        self._unsubscribers.append(self.state.subscribe(self._on_state_change))
        self._unsubscribers.append(self.state.subscribe(self.audio.on_change))

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        try:
            pygame.init()
        except pygame.error as exc:
            print(f"Error initialising pygame: {exc}", file=sys.stderr)
            return False

        flags = pygame.RESIZABLE
        if self.fullscreen:
            flags = pygame.FULLSCREEN

        try:
            self.screen = pygame.display.set_mode((self.width, self.height), flags)
        except pygame.error as exc:
            print(f"Error creating display: {exc}", file=sys.stderr)
            pygame.quit()
            return False

        pygame.display.set_caption(TITLE)
        pygame.key.start_text_input()
        self.clock = pygame.time.Clock()
        width, height = self.screen.get_size()
        self.layout = Layout(width, height)
        self.audio.init()

        self.running = True
        self.dirty = True
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Process input and redraw on change until the window closes."""
        if not self.running:
            return

        try:
            while self.running:
                frame_start = time.perf_counter()

                self._handle_events()
                if self.dirty:
                    self._render()
                    self.dirty = False

                self.clock.tick(UPDATE_RATE)

                elapsed = time.perf_counter() - frame_start
                self.frame_times.append(elapsed)
                if len(self.frame_times) > UPDATE_RATE:
                    self.frame_times.pop(0)
                avg = sum(self.frame_times) / len(self.frame_times)
                self.fps = 1.0 / avg if avg > 0 else 0.0
                if self.debug:
                    self.dirty = True
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── State observer ──────────────────────────────────────────────────

    def _on_state_change(self, state: ScoreState, change: Change) -> None:
        self.dirty = True

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos)
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)
            elif event.type == pygame.TEXTINPUT:
                self.handle_text(event.text)
            elif event.type == pygame.VIDEORESIZE:
                self.layout = Layout(event.w, event.h)
                self.dirty = True
            elif event.type in (pygame.WINDOWEXPOSED, pygame.WINDOWRESTORED):
                self.dirty = True

    def dispatch(self, event: Optional[InputEvent]) -> None:
        """Route an input event to the editor, the app or the score state."""
        if event is None:
            return
        if event.action == ScoreAction.QUIT:
            self.running = False
        elif event.action == ScoreAction.FOCUS_NAME:
            self.editor.begin(event.team_index, self.state.team(event.team_index).name)
            self.dirty = True
        else:
            apply_event(self.state, event)

    def handle_click(self, pos: tuple[int, int]) -> None:
        """Left click at window coordinates *pos*."""
        event = self.layout.hit_test(pos, self.state.mode)
        if self.editor.active and event.action != ScoreAction.FOCUS_NAME:
            self.editor.finish()
            self.dirty = True
        self.dispatch(event)

    def handle_key(self, key: int) -> None:
        """Key press.  While a name field is focused, only editing keys act;
        typed characters arrive through ``handle_text``.
        """
        if self.editor.active:
            if key in _FINISH_EDIT_KEYS:
                self.editor.finish()
                self.dirty = True
            elif key == pygame.K_BACKSPACE:
                self.dispatch(self.editor.backspace())
            return

        if key == pygame.K_ESCAPE:
            self.dispatch(InputEvent(ScoreAction.QUIT))
        elif key == pygame.K_m:
            self.dispatch(InputEvent(ScoreAction.NEXT_MODE))

    def handle_text(self, text: str) -> None:
        """Committed text (TEXTINPUT), including dead-key and IME composition."""
        if self.editor.active:
            self.dispatch(self.editor.insert(text))

    # ── Rendering ───────────────────────────────────────────────────────

    def _font(self, size: int):
        """Return a cached font of *size* pixels, bundled font if present."""
        font = self._fonts.get(size)
        if font is None:
            if os.path.isfile(FONT_PATH):
                font = pygame.font.Font(FONT_PATH, size)
            else:
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _blit_text(self, text: str, size: int, color, rect, align: str = "center") -> None:
        surf = self._font(size).render(text, True, color)
        pos = surf.get_rect()
        pos.centery = rect.centery
        if align == "left":
            pos.left = rect.left
        elif align == "right":
            pos.right = rect.right
        else:
            pos.centerx = rect.centerx
        self.screen.blit(surf, pos)

    def _render(self) -> None:
        """Execute the rendering pipeline."""
        if self.screen is None:
            return

        self.screen.fill(COLOR_BACKGROUND)
        self._render_toolbar()
        for i in range(NUM_TEAMS):
            self._render_team(i)
        self._render_leaderboard()

        if self.debug:
            self._render_debug()

        pygame.display.flip()

    def _render_toolbar(self) -> None:
        toolbar = self.layout.toolbar_rect
        title_rect = toolbar.inflate(-2 * PADDING, 0)
        self._blit_text(TITLE, FONT_SIZE_TITLE, COLOR_TEXT, title_rect, align="left")

        picker = self.layout.picker_rect
        pygame.draw.rect(self.screen, COLOR_PANEL, picker, border_radius=BUTTON_RADIUS)
        self._blit_text(self.state.mode.label, FONT_SIZE_BUTTON, COLOR_BUTTON, picker)

        self._draw_reset_icon(self.layout.reset_all_rect, COLOR_BUTTON)

    def _render_team(self, team_index: int) -> None:
        panel = self.layout.team_panel(team_index)
        team = self.state.team(team_index)
        pygame.draw.rect(self.screen, COLOR_PANEL, panel.panel, border_radius=PANEL_RADIUS)

        editing = self.editor.team_index == team_index
        name = self.editor.text if editing else team.name
        if name:
            self._blit_text(name, FONT_SIZE_NAME, COLOR_TEXT, panel.name_rect)
        elif not editing:
            self._blit_text(NAME_PLACEHOLDER, FONT_SIZE_NAME, COLOR_PLACEHOLDER, panel.name_rect)
        if editing:
            line = panel.name_rect
            pygame.draw.line(
                self.screen, COLOR_FOCUS, line.bottomleft, line.bottomright, 2,
            )

        self._draw_reset_icon(panel.reset_rect, COLOR_CAPTION)
        self._blit_text(
            team_caption(team_index), FONT_SIZE_CAPTION, COLOR_CAPTION, panel.caption_rect,
        )

        score_size = max(FONT_SIZE_CAPTION, min(FONT_SIZE_SCORE, panel.score_rect.height))
        self._blit_text(format_score(team.score), score_size, COLOR_TEXT, panel.score_rect)

        for delta, rect in panel.buttons(self.state.mode):
            pygame.draw.rect(self.screen, COLOR_BUTTON, rect, border_radius=BUTTON_RADIUS)
            self._blit_text(increment_label(delta), FONT_SIZE_BUTTON, COLOR_BUTTON_TEXT, rect)

    def _render_leaderboard(self) -> None:
        board = self.layout.leaderboard_rect
        pygame.draw.rect(self.screen, COLOR_PANEL, board, border_radius=PANEL_RADIUS)
        self._blit_text(
            LEADERBOARD_TITLE, FONT_SIZE_LEADERBOARD_TITLE, COLOR_TEXT,
            self.layout.leaderboard_title_rect,
        )

        for position, row in enumerate(leaderboard_rows(self.state)):
            rect = self.layout.leaderboard_row_rect(position)
            radius = min(rect.height, FONT_SIZE_LEADERBOARD_ROW) // 2
            badge_center = (rect.x + radius + 4, rect.centery)
            self._draw_badge(row.badge, row.rank, badge_center, radius)

            name_rect = rect.copy()
            name_rect.left = rect.x + 2 * radius + PADDING
            self._blit_text(row.name, FONT_SIZE_LEADERBOARD_ROW, COLOR_TEXT, name_rect, align="left")
            self._blit_text(row.score_text, FONT_SIZE_LEADERBOARD_ROW, COLOR_TEXT, rect, align="right")

    def _draw_badge(self, badge: Badge, rank: int, center: tuple[int, int], radius: int) -> None:
        """Draw the rank badge: crown, medal, numbered or unknown circle."""
        cx, cy = center
        color = badge.color
        if badge.symbol == BadgeSymbol.CROWN:
            r = radius
            points = [
                (cx - r, cy + r // 2), (cx - r, cy - r // 2),
                (cx - r // 2, cy), (cx, cy - r),
                (cx + r // 2, cy), (cx + r, cy - r // 2),
                (cx + r, cy + r // 2),
            ]
            pygame.draw.polygon(self.screen, color, points)
        elif badge.symbol == BadgeSymbol.MEDAL:
            ribbon = [
                (cx - radius // 2, cy - radius), (cx + radius // 2, cy - radius),
                (cx, cy),
            ]
            pygame.draw.polygon(self.screen, color, ribbon)
            pygame.draw.circle(self.screen, color, (cx, cy + radius // 3), radius * 2 // 3)
        else:
            label = "?" if badge.symbol == BadgeSymbol.UNKNOWN else str(rank)
            pygame.draw.circle(self.screen, color, center, radius)
            rect = pygame.Rect(0, 0, 2 * radius, 2 * radius)
            rect.center = center
            self._blit_text(label, radius * 3 // 2, COLOR_BUTTON_TEXT, rect)

    def _draw_reset_icon(self, rect, color) -> None:
        """Counter-clockwise arrow inside *rect*."""
        inner = rect.inflate(-rect.width // 4, -rect.height // 4)
        pygame.draw.arc(self.screen, color, inner, 0.6, 5.5, 3)
        tip_x, tip_y = inner.right - 2, inner.centery - inner.height // 4
        pygame.draw.polygon(
            self.screen, color,
            [(tip_x - 6, tip_y - 6), (tip_x + 4, tip_y - 4), (tip_x, tip_y + 5)],
        )

    def _render_debug(self) -> None:
        """Draw debug overlay (FPS, mode, focused field)."""
        focused = "-" if self.editor.team_index is None else str(self.editor.team_index)
        texts = [
            f"FPS: {self.fps:.1f}",
            f"Mode: {self.state.mode.name}",
            f"Editing: {focused}",
        ]
        font = self._font(FONT_SIZE_DEBUG)
        y = self.layout.height - PADDING - FONT_SIZE_DEBUG * len(texts)
        for text in texts:
            surface = font.render(text, True, COLOR_DEBUG)
            self.screen.blit(surface, (5, y))
            y += FONT_SIZE_DEBUG

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Unsubscribe from the state, release audio and quit pygame."""
        self.running = False
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.audio.shutdown()
        pygame.quit()


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)

    app = ScoreboardApp(
        width=args.width,
        height=args.height,
        fullscreen=args.fullscreen,
        debug=args.debug,
        mute=args.mute,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
