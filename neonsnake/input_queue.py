"""
input_queue.py — Buffered direction intents.

Completely isolated from rendering and pygame.
Lets the player chain quick turns (e.g. up-then-left within one tick)
without ever letting the snake reverse into itself.

Rules:
  - An intent opposite to the snake's current direction is refused
    outright (the caller turns that into a small cosmetic shake).
  - An intent equal to the last queued direction (or the pending
    direction when the queue is empty) is a duplicate and ignored.
  - An intent opposite to that same reference is refused silently.
  - The queue holds 2 intents, or 4 while the head is near a wall;
    when full, the oldest intent is evicted.
  - One intent is consumed per logic tick.
"""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .config import COLS, ROWS, QUEUE_SIZE, QUEUE_SIZE_WALL, WALL_MARGIN

if TYPE_CHECKING:
    from .model import Direction, Snake


class EnqueueResult(enum.Enum):
    QUEUED = "queued"
    DUPLICATE = "duplicate"
    REJECTED_REVERSAL = "rejected_reversal"
    REJECTED_OPPOSITE = "rejected_opposite"


def near_wall(
    cell: tuple[int, int],
    cols: int = COLS,
    rows: int = ROWS,
    margin: int = WALL_MARGIN,
) -> bool:
    x, y = cell
    return x < margin or x >= cols - margin or y < margin or y >= rows - margin


class InputQueue:
    """Bounded FIFO of Directions with newest-wins overwrite."""

    def __init__(
        self,
        size: int = QUEUE_SIZE,
        wall_size: int = QUEUE_SIZE_WALL,
        margin: int = WALL_MARGIN,
    ):
        self.size = size
        self.wall_size = wall_size
        self.margin = margin
        self._items: deque[Direction] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._items)

    def capacity(self, snake: Snake, cols: int = COLS, rows: int = ROWS) -> int:
        if near_wall(snake.head, cols, rows, self.margin):
            return self.wall_size
        return self.size

    def enqueue(
        self,
        direction: Direction,
        snake: Snake,
        cols: int = COLS,
        rows: int = ROWS,
    ) -> EnqueueResult:
        if direction.is_opposite(snake.dir):
            return EnqueueResult.REJECTED_REVERSAL

        reference = self._items[-1] if self._items else snake.next_dir
        if direction == reference:
            return EnqueueResult.DUPLICATE
        if direction.is_opposite(reference):
            return EnqueueResult.REJECTED_OPPOSITE

        limit = self.capacity(snake, cols, rows)
        while len(self._items) >= limit:
            self._items.popleft()
        self._items.append(direction)
        return EnqueueResult.QUEUED

    def dequeue_one(self, snake: Snake) -> Direction | None:
        """
        Pop the oldest intent and make it the snake's pending direction.
        Returns the applied direction, or None when nothing was applied
        (queue empty, or the intent went stale against the current
        direction).
        """
        if not self._items:
            return None
        direction = self._items.popleft()
        if direction.is_opposite(snake.dir):
            return None
        snake.next_dir = direction
        return direction

    def clear(self) -> None:
        self._items.clear()
