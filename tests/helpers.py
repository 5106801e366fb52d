from __future__ import annotations

from collections import deque

from neonsnake.config import CELL
from neonsnake.model import Direction, Snake


class RecordingSounds:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def play_eat(self) -> None:
        self.calls.append("eat")

    def play_crash(self) -> None:
        self.calls.append("crash")


def make_snake(cells: list[tuple[int, int]], direction: Direction) -> Snake:
    snake = Snake(*cells[0], start_dir=direction)
    snake.body = deque(cells)
    snake.render_pos = deque([[x * CELL, y * CELL] for x, y in cells])
    return snake


def run_for(session, ms: int, step: int = 10) -> None:
    """Feed the session frame timestamps every `step` ms for `ms` ms."""
    t = session.now
    end = t + ms
    while t < end:
        t += step
        session.frame(t)
