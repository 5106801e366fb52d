"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop (the render loop: one pass per display frame).
  - Translate raw keyboard events into session commands.
  - Feed the session a monotonic millisecond timestamp every frame,
    then ask the view to render.
  - Keep the soundtrack in step with the game state.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that reads pygame events.
"""

import logging
import sys

import pygame

from .audio import SoundEffects
from .config import (
    WIDTH, HEIGHT, FPS,
    STATE_MENU, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
)
from .model import Direction, GameSession
from .storage import Preferences
from .view import GameView

logger = logging.getLogger(__name__)

# Arrows, WASD and ZQSD (AZERTY) all steer
DIRECTION_KEYS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_z:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_q:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}

DIFFICULTY_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
}


class GameController:
    """
    Owns the main loop.
    Glues Session <-> View without them knowing about each other.
    """

    def __init__(self, prefs: Preferences, difficulty: int | None = None, mute: bool = False):
        pygame.init()
        self.screen  = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("NEON SNAKE")
        self.clock   = pygame.time.Clock()
        self.prefs   = prefs
        if mute:
            prefs.mute()
        self.sounds  = SoundEffects(sound_enabled=prefs.sound, music_enabled=prefs.music)
        self.session = GameSession(sounds=self.sounds, prefs=prefs)
        if difficulty is not None:
            self.session.set_difficulty(difficulty)
        self.view    = GameView(self.screen)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Render frames until the window closes.  Pause and game over only stop logic."""
        while True:
            self.clock.tick(FPS)
            self._handle_events()
            self.session.frame(pygame.time.get_ticks())
            self.view.render(self.session)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key: int) -> None:
        if key == pygame.K_n:
            self._toggle_sound()
            return
        if key == pygame.K_m:
            self._toggle_music()
            return

        state = self.session.state

        if state == STATE_MENU:
            self._handle_menu_keys(key)
        elif state in (STATE_PLAYING, STATE_PAUSED):
            self._handle_playing_keys(key)
        elif state == STATE_OVER:
            self._handle_over_keys(key)

    # ── Per-state key handlers ────────────────────────────────────
    def _handle_menu_keys(self, key: int) -> None:
        if key in (pygame.K_RETURN, pygame.K_SPACE):
            self.session.start()
            self.sounds.play_music()
        elif key == pygame.K_ESCAPE:
            self._quit()
        elif key in DIFFICULTY_KEYS:
            self.session.set_difficulty(DIFFICULTY_KEYS[key])

    def _handle_playing_keys(self, key: int) -> None:
        if key in DIRECTION_KEYS:
            self.session.steer(DIRECTION_KEYS[key])
        elif key in (pygame.K_SPACE, pygame.K_p):
            self.session.toggle_pause()
            if self.session.state == STATE_PAUSED:
                self.sounds.pause_music()
            else:
                self.sounds.resume_music()
        elif key == pygame.K_r:
            self._restart()
        elif key in (pygame.K_ESCAPE, pygame.K_h):
            self._return_to_menu()

    def _handle_over_keys(self, key: int) -> None:
        if key in (pygame.K_r, pygame.K_SPACE, pygame.K_RETURN):
            self._restart()
        elif key in (pygame.K_ESCAPE, pygame.K_h):
            self._return_to_menu()
        elif key in DIFFICULTY_KEYS:
            self.session.set_difficulty(DIFFICULTY_KEYS[key])

    # ── Commands ─────────────────────────────────────────────────
    def _restart(self) -> None:
        self.session.restart()
        self.sounds.play_music()

    def _return_to_menu(self) -> None:
        self.session.return_to_menu()
        self.sounds.stop_music()

    def _toggle_sound(self) -> None:
        self.sounds.set_sound(self.prefs.toggle("sound"))

    def _toggle_music(self) -> None:
        self.sounds.set_music(self.prefs.toggle("music"), running=self.session.state == STATE_PLAYING)

    # ── Utilities ─────────────────────────────────────────────────
    def _quit(self) -> None:
        logger.info("quitting")
        self.sounds.stop_music()
        pygame.quit()
        sys.exit()
