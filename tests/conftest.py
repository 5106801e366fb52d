from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture
def sounds():
    from tests.helpers import RecordingSounds

    return RecordingSounds()


@pytest.fixture
def session(sounds):
    from neonsnake.model import GameSession

    s = GameSession(sounds=sounds, rng=random.Random(7))
    s.frame(0)
    return s
