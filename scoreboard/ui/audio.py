"""
Audio manager for the party scoreboard.

Plays short feedback sounds for score changes, gracefully degrading when
pygame.mixer is unavailable or sound files are missing.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

import pygame

from scoreboard.state import Change, ChangeKind


class SoundEvent(Enum):
    """Identifiers for feedback sounds."""
    SCORE_ADDED = auto()
    SCORE_RESET = auto()
    ALL_RESET = auto()
    MODE_CHANGED = auto()


# Map each event to its .wav file name inside data/sfx/
_SOUND_FILES: dict[SoundEvent, str] = {
    SoundEvent.SCORE_ADDED: "score_added.wav",
    SoundEvent.SCORE_RESET: "score_reset.wav",
    SoundEvent.ALL_RESET: "all_reset.wav",
    SoundEvent.MODE_CHANGED: "mode_changed.wav",
}

_CHANGE_SOUNDS: dict[ChangeKind, SoundEvent] = {
    ChangeKind.SCORE_ADDED: SoundEvent.SCORE_ADDED,
    ChangeKind.SCORE_RESET: SoundEvent.SCORE_RESET,
    ChangeKind.ALL_RESET: SoundEvent.ALL_RESET,
    ChangeKind.MODE: SoundEvent.MODE_CHANGED,
}


def sound_for_change(change: Change) -> Optional[SoundEvent]:
    """Return the sound for a state change, or None (name edits are silent)."""
    return _CHANGE_SOUNDS.get(change.kind)


@dataclass
class AudioManager:
    """Loads and plays sound effects.

    Falls back to silent operation when mixer is unavailable or
    individual sound files are missing.
    """

    sfx_dir: str = os.path.join("data", "sfx")
    enabled: bool = True

    # Internal state
    _initialized: bool = field(default=False, repr=False)
    _sounds: dict[SoundEvent, Any] = field(default_factory=dict, repr=False)

    def init(self) -> bool:
        """Initialise the mixer and load available sound files.

        Returns True if the mixer was initialised successfully.

        Inside a virtual environment the default SDL audio driver may not
        be detected, so several common drivers are tried in turn.
        """
        if not self.enabled:
            return False

        if not pygame.mixer.get_init():
            original_driver = os.environ.get("SDL_AUDIODRIVER")
            initialized = False
            for driver in [None, "pulseaudio", "alsa", "dsp", "dummy"]:
                try:
                    if driver is not None:
                        os.environ["SDL_AUDIODRIVER"] = driver
                    pygame.mixer.init()
                    initialized = True
                    break
                except pygame.error:
                    continue
            if not initialized:
                if original_driver is not None:
                    os.environ["SDL_AUDIODRIVER"] = original_driver
                elif "SDL_AUDIODRIVER" in os.environ:
                    del os.environ["SDL_AUDIODRIVER"]
                self._initialized = False
                return False

        self._initialized = True
        self._load_sounds()
        return True

    def _load_sounds(self) -> None:
        """Attempt to load each configured sound file."""
        if not self._initialized:
            return

        for event, filename in _SOUND_FILES.items():
            path = os.path.join(self.sfx_dir, filename)
            if os.path.isfile(path):
                try:
                    self._sounds[event] = pygame.mixer.Sound(path)
                except pygame.error:
                    continue

    def play(self, event: SoundEvent) -> None:
        """Play the sound associated with *event*, if available."""
        if not self._initialized or not self.enabled:
            return
        sound = self._sounds.get(event)
        if sound is not None:
            try:
                sound.play()
            except pygame.error:
                pass

    def on_change(self, state: Any, change: Change) -> None:
        """ScoreState observer: play the sound matching *change*."""
        event = sound_for_change(change)
        if event is not None:
            self.play(event)

    def shutdown(self) -> None:
        """Release mixer resources."""
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            self._sounds.clear()
