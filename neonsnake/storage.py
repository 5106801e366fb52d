"""
storage.py — Persistent key/value store.

Keeps the high score and the sound / music switches in a small JSON
file.  Any I/O or decoding failure is logged and swallowed: a broken
save file must never stop the game.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class Preferences:
    """High score + audio toggles.  path=None keeps everything in memory."""

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else None
        self.high_score: int = 0
        self.sound: bool = True
        self.music: bool = True
        # Switches as they were on disk, held while a --mute run overrides them
        self._persisted_audio: tuple[bool, bool] | None = None

    @classmethod
    def load(cls, path: Path | None) -> "Preferences":
        prefs = cls(path)
        if prefs.path is None or not prefs.path.is_file():
            return prefs
        try:
            data = json.loads(prefs.path.read_text(encoding="utf-8"))
            prefs.high_score = max(0, int(data.get("high_score", 0)))
            prefs.sound = bool(data.get("sound", True))
            prefs.music = bool(data.get("music", True))
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("could not read preferences from %s: %s", prefs.path, exc)
        return prefs

    @property
    def muted(self) -> bool:
        return self._persisted_audio is not None

    def mute(self) -> None:
        """Silence this run only.  The saved switches stay as they were."""
        if self._persisted_audio is None:
            self._persisted_audio = (self.sound, self.music)
        self.sound = False
        self.music = False

    def toggle(self, key: str) -> bool:
        """Flip the "sound" or "music" switch, save, and return the new value."""
        value = not getattr(self, key)
        setattr(self, key, value)
        self.save()
        return value

    def to_dict(self) -> dict:
        sound, music = self._persisted_audio or (self.sound, self.music)
        return {"high_score": self.high_score, "sound": sound, "music": music}

    def save(self) -> None:
        if self.path is None:
            return
        try:
            self.path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not save preferences to %s: %s", self.path, exc)
