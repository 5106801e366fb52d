"""
audio.py — Sound-trigger capability.

Two fire-and-forget effects (eat / crash) synthesised at start-up, plus
an optional looping soundtrack.

Music notes:
  - music.mp3 must live in the same folder as this file (neonsnake/music.mp3).
  - It loops while a run is in progress, pauses with the game and
    stops when returning to the menu.
  - If the file is missing, or there is no audio device at all, the
    game runs silently with a logged warning.
"""

import logging
import math
import os

import pygame

logger = logging.getLogger(__name__)

# Music file is expected next to this module: neonsnake/music.mp3
_MUSIC_PATH = os.path.join(os.path.dirname(__file__), "music.mp3")


def _tone(frequency: float, duration_ms: int, volume: float, square: bool = False) -> pygame.mixer.Sound:
    """Mono waveform with a fast attack and exponential release, expanded to the mixer's channels."""
    sample_rate, _, channels = pygame.mixer.get_init()
    n_samples = int(sample_rate * duration_ms / 1000)
    buffer = bytearray()
    for i in range(n_samples):
        t = i / sample_rate
        wave = math.sin(2 * math.pi * frequency * t)
        if square:
            wave = 1.0 if wave >= 0 else -1.0
        envelope = min(1.0, t / 0.01) * math.exp(-5.0 * i / n_samples)
        sample = int(32767 * volume * envelope * wave)
        buffer += sample.to_bytes(2, byteorder="little", signed=True) * channels
    return pygame.mixer.Sound(buffer=bytes(buffer))


class SoundEffects:
    """
    Owns the pygame mixer.  Every call is safe when audio is unavailable:
    failures are logged once at start-up and the methods become no-ops.
    """

    def __init__(self, sound_enabled: bool = True, music_enabled: bool = True):
        self.sound_enabled = sound_enabled
        self.music_enabled = music_enabled
        self._eat = None
        self._crash = None
        self._music_ok = False
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("audio disabled, mixer unavailable: %s", exc)
            return
        self._eat = _tone(880, 180, 0.2)
        self._crash = _tone(120, 600, 0.4, square=True)
        self._music_ok = self._load_music()

    # ── Effects ──────────────────────────────────────────────────
    def play_eat(self) -> None:
        if self.sound_enabled and self._eat is not None:
            self._eat.play()

    def play_crash(self) -> None:
        if self.sound_enabled and self._crash is not None:
            self._crash.play()

    # ── Music helpers ─────────────────────────────────────────────
    def _load_music(self) -> bool:
        """Load music.mp3. Returns True on success, False on any failure."""
        if not os.path.isfile(_MUSIC_PATH):
            logger.info("music.mp3 not found at '%s', running without music", _MUSIC_PATH)
            return False
        try:
            pygame.mixer.music.load(_MUSIC_PATH)
            pygame.mixer.music.set_volume(0.25)
            return True
        except pygame.error as exc:
            logger.warning("could not load music.mp3: %s", exc)
            return False

    def play_music(self) -> None:
        """Start looping playback from the beginning."""
        if self._music_ok and self.music_enabled:
            pygame.mixer.music.play(loops=-1)

    def pause_music(self) -> None:
        if self._music_ok and pygame.mixer.music.get_busy():
            pygame.mixer.music.pause()

    def resume_music(self) -> None:
        if self._music_ok and self.music_enabled:
            pygame.mixer.music.unpause()

    def stop_music(self) -> None:
        if self._music_ok:
            pygame.mixer.music.stop()

    # ── Toggles ──────────────────────────────────────────────────
    def set_sound(self, enabled: bool) -> None:
        self.sound_enabled = enabled
        self.play_eat()  # audible confirmation

    def set_music(self, enabled: bool, running: bool) -> None:
        """Switch the soundtrack; starts it immediately if a run is in progress."""
        self.music_enabled = enabled
        if not enabled:
            self.stop_music()
        elif running:
            self.play_music()
        self.play_eat()
