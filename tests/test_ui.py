"""
Tests for the presentation helpers: text, layout/hit-testing and audio.

None of these need an open display.
"""

import pygame
import pytest

from scoreboard.config import MAX_NAME_LENGTH, NUM_TEAMS, SCREEN_HEIGHT, SCREEN_WIDTH
from scoreboard.models.mode import GameMode
from scoreboard.state import Change, ChangeKind, ScoreState
from scoreboard.ui.audio import AudioManager, SoundEvent, sound_for_change
from scoreboard.ui.layout import Layout
from scoreboard.ui.text import NameEditor, leaderboard_rows, team_caption
from scoreboard.utils.functions import BadgeSymbol
from scoreboard.utils.input_handler import ScoreAction


# ── Text ────────────────────────────────────────────────────────────────────


class TestTeamCaption:
    def test_captions(self):
        assert team_caption(0) == "TEAM 1"
        assert team_caption(4) == "TEAM 5"


class TestLeaderboardRows:
    def test_rows_follow_rankings(self):
        state = ScoreState()
        state.set_mode(GameMode.ONE_WORD)
        state.set_team_name(2, "Owls")
        state.add_to_score(0, 4)
        state.add_to_score(1, 2)
        state.add_to_score(2, 4)
        state.add_to_score(2, 0.5)
        rows = leaderboard_rows(state)
        assert [r.name for r in rows] == ["Owls", "Team 1", "Team 2", "Team 4", "Team 5"]
        assert [r.score_text for r in rows] == ["4.5", "4", "2", "0", "0"]
        assert [r.rank for r in rows] == [1, 2, 3, 4, 5]
        assert rows[0].badge.symbol == BadgeSymbol.CROWN
        assert rows[1].badge.symbol == rows[2].badge.symbol == BadgeSymbol.MEDAL


class TestNameEditor:
    def test_inactive_by_default(self):
        editor = NameEditor()
        assert not editor.active
        assert editor.insert("a") is None
        assert editor.backspace() is None

    def test_insert_yields_rename(self):
        editor = NameEditor()
        editor.begin(3, "Ow")
        event = editor.insert("l")
        assert event.action == ScoreAction.RENAME
        assert event.team_index == 3
        assert event.name == "Owl"

    def test_backspace_to_empty(self):
        editor = NameEditor()
        editor.begin(0, "A")
        event = editor.backspace()
        assert event.name == ""
        assert editor.backspace() is None

    def test_non_printable_ignored(self):
        editor = NameEditor()
        editor.begin(0, "")
        assert editor.insert("\r") is None
        assert editor.insert("") is None

    def test_truncated_to_max_length(self):
        editor = NameEditor()
        editor.begin(1, "x" * (MAX_NAME_LENGTH - 1))
        event = editor.insert("yz")
        assert event.name == "x" * (MAX_NAME_LENGTH - 1) + "y"
        assert editor.insert("z") is None

    def test_finish(self):
        editor = NameEditor()
        editor.begin(1, "Owls")
        editor.finish()
        assert not editor.active
        assert editor.text == ""


# ── Layout ──────────────────────────────────────────────────────────────────


class TestLayout:
    def setup_method(self):
        self.layout = Layout(SCREEN_WIDTH, SCREEN_HEIGHT)

    def test_cells_inside_grid_and_disjoint(self):
        grid = self.layout.grid_rect
        cells = [self.layout.cell_rect(i) for i in range(6)]
        for i, cell in enumerate(cells):
            assert grid.contains(cell)
            for other in cells[i + 1:]:
                assert not cell.colliderect(other)

    def test_cell_out_of_range(self):
        with pytest.raises(IndexError):
            self.layout.cell_rect(6)

    def test_leaderboard_is_sixth_cell(self):
        assert self.layout.leaderboard_rect == self.layout.cell_rect(5)

    def test_team_panel_out_of_range(self):
        with pytest.raises(IndexError):
            self.layout.team_panel(NUM_TEAMS)

    @pytest.mark.parametrize("mode", list(GameMode))
    def test_buttons_per_mode(self, mode):
        panel = self.layout.team_panel(0)
        buttons = panel.buttons(mode)
        assert [d for d, _ in buttons] == list(mode.increments)
        for i, (_, rect) in enumerate(buttons):
            assert panel.panel.contains(rect)
            for _, other in buttons[i + 1:]:
                assert not rect.colliderect(other)

    def test_single_button_centred(self):
        panel = self.layout.team_panel(2)
        [(_, rect)] = panel.buttons(GameMode.TELEPHONE_PICTIONARY)
        assert abs(rect.centerx - panel.button_row.centerx) <= 1

    def test_leaderboard_rows_stack(self):
        rows = [self.layout.leaderboard_row_rect(i) for i in range(NUM_TEAMS)]
        for upper, lower in zip(rows, rows[1:]):
            assert upper.bottom <= lower.top
        assert self.layout.leaderboard_rect.contains(rows[-1])


class TestHitTest:
    def setup_method(self):
        self.layout = Layout(SCREEN_WIDTH, SCREEN_HEIGHT)

    def test_reset_all(self):
        event = self.layout.hit_test(self.layout.reset_all_rect.center, GameMode.ONE_WORD)
        assert event.action == ScoreAction.RESET_ALL

    def test_picker(self):
        event = self.layout.hit_test(self.layout.picker_rect.center, GameMode.ONE_WORD)
        assert event.action == ScoreAction.NEXT_MODE

    @pytest.mark.parametrize("team_index", range(NUM_TEAMS))
    def test_increment_buttons(self, team_index):
        panel = self.layout.team_panel(team_index)
        for delta, rect in panel.buttons(GameMode.ONE_WORD):
            event = self.layout.hit_test(rect.center, GameMode.ONE_WORD)
            assert event.action == ScoreAction.ADD_SCORE
            assert event.team_index == team_index
            assert event.delta == delta

    def test_hidden_buttons_do_not_hit(self):
        panel = self.layout.team_panel(0)
        one_word = dict(panel.buttons(GameMode.ONE_WORD))
        event = self.layout.hit_test(one_word[4.0].center, GameMode.TELEPHONE_PICTIONARY)
        assert event.action == ScoreAction.NONE

    def test_team_reset(self):
        panel = self.layout.team_panel(3)
        event = self.layout.hit_test(panel.reset_rect.center, GameMode.ONE_WORD)
        assert event.action == ScoreAction.RESET_TEAM
        assert event.team_index == 3

    def test_name_field(self):
        panel = self.layout.team_panel(1)
        event = self.layout.hit_test(panel.name_rect.center, GameMode.ONE_WORD)
        assert event.action == ScoreAction.FOCUS_NAME
        assert event.team_index == 1

    def test_leaderboard_and_empty_space(self):
        assert self.layout.hit_test(
            self.layout.leaderboard_rect.center, GameMode.ONE_WORD,
        ).action == ScoreAction.NONE
        assert self.layout.hit_test((0, SCREEN_HEIGHT - 1), GameMode.ONE_WORD).action == ScoreAction.NONE


# ── Audio ───────────────────────────────────────────────────────────────────


class TestAudioManager:
    def test_disabled_audio_does_not_init(self):
        am = AudioManager(enabled=False)
        assert am.init() is False
        assert am._initialized is False

    def test_play_when_not_initialized(self):
        am = AudioManager(enabled=False)
        # Should not raise
        am.play(SoundEvent.SCORE_ADDED)

    def test_shutdown_when_not_initialized(self):
        am = AudioManager(enabled=False)
        am.shutdown()

    def test_missing_sfx_dir(self):
        am = AudioManager(sfx_dir="/nonexistent/path")
        am._load_sounds()
        assert len(am._sounds) == 0

    def test_observer_when_not_initialized(self):
        am = AudioManager(enabled=False)
        state = ScoreState()
        state.subscribe(am.on_change)
        state.add_to_score(0, 3)

    def test_change_to_sound(self):
        assert sound_for_change(Change(ChangeKind.SCORE_ADDED, 0)) == SoundEvent.SCORE_ADDED
        assert sound_for_change(Change(ChangeKind.SCORE_RESET, 0)) == SoundEvent.SCORE_RESET
        assert sound_for_change(Change(ChangeKind.ALL_RESET)) == SoundEvent.ALL_RESET
        assert sound_for_change(Change(ChangeKind.MODE)) == SoundEvent.MODE_CHANGED
        assert sound_for_change(Change(ChangeKind.NAME, 0)) is None

    def test_playback_error_does_not_escape_mutation(self):
        class BrokenSound:
            def play(self):
                raise pygame.error("no free channel")

        am = AudioManager()
        am._initialized = True
        am._sounds[SoundEvent.SCORE_ADDED] = BrokenSound()
        state = ScoreState()
        state.subscribe(am.on_change)
        state.add_to_score(1, 3)
        assert state.score(1) == 3.0
