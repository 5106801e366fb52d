from __future__ import annotations

import random

from neonsnake.input_queue import EnqueueResult, InputQueue, near_wall
from neonsnake.model import ALL_DIRS, Direction, Snake

UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


def test_reversal_of_current_direction_is_rejected() -> None:
    queue = InputQueue()
    snake = Snake(20, 15, RIGHT)
    assert queue.enqueue(LEFT, snake) is EnqueueResult.REJECTED_REVERSAL
    assert len(queue) == 0
    assert snake.next_dir == RIGHT


def test_duplicates_and_opposites_of_last_intent_are_ignored() -> None:
    queue = InputQueue()
    snake = Snake(20, 15, RIGHT)
    assert queue.enqueue(RIGHT, snake) is EnqueueResult.DUPLICATE
    assert queue.enqueue(UP, snake) is EnqueueResult.QUEUED
    assert queue.enqueue(UP, snake) is EnqueueResult.DUPLICATE
    assert queue.enqueue(DOWN, snake) is EnqueueResult.REJECTED_OPPOSITE
    assert list(queue) == [UP]


def test_full_queue_evicts_the_oldest_intent() -> None:
    queue = InputQueue()
    snake = Snake(20, 15, RIGHT)
    queue.enqueue(UP, snake)
    queue.enqueue(RIGHT, snake)
    assert queue.enqueue(DOWN, snake) is EnqueueResult.QUEUED
    assert list(queue) == [RIGHT, DOWN]


def test_capacity_widens_near_a_wall() -> None:
    queue = InputQueue()
    snake = Snake(2, 15, RIGHT)
    assert queue.capacity(snake) == 4
    for direction in (UP, RIGHT, DOWN, RIGHT, UP):
        queue.enqueue(direction, snake)
    assert list(queue) == [RIGHT, DOWN, RIGHT, UP]

    assert queue.capacity(Snake(20, 15)) == 2


def test_near_wall_band() -> None:
    assert near_wall((4, 20))
    assert near_wall((45, 20))
    assert near_wall((20, 33))
    assert not near_wall((5, 5))
    assert not near_wall((44, 32))


def test_dequeue_applies_one_intent_per_call() -> None:
    queue = InputQueue()
    snake = Snake(20, 15, RIGHT)
    queue.enqueue(UP, snake)
    queue.enqueue(RIGHT, snake)

    assert queue.dequeue_one(snake) == UP
    assert snake.next_dir == UP
    assert len(queue) == 1
    assert queue.dequeue_one(snake) == RIGHT
    assert snake.next_dir == RIGHT
    assert queue.dequeue_one(snake) is None


def test_stale_intent_is_discarded_on_dequeue() -> None:
    queue = InputQueue()
    snake = Snake(20, 15, RIGHT)
    queue.enqueue(UP, snake)
    snake.dir = DOWN
    snake.next_dir = DOWN

    assert queue.dequeue_one(snake) is None
    assert snake.next_dir == DOWN
    assert len(queue) == 0


def test_length_never_exceeds_dynamic_capacity() -> None:
    rng = random.Random(3)
    queue = InputQueue()
    snake = Snake(20, 15, RIGHT)
    for _ in range(2000):
        snake.body[0] = (rng.randrange(50), rng.randrange(38))
        if rng.random() < 0.3:
            queue.dequeue_one(snake)
            snake.dir = snake.next_dir
        else:
            queue.enqueue(rng.choice(ALL_DIRS), snake)
            assert len(queue) <= queue.capacity(snake)
        assert len(queue) <= queue.wall_size


def test_clear() -> None:
    queue = InputQueue()
    snake = Snake(20, 15, RIGHT)
    queue.enqueue(UP, snake)
    queue.clear()
    assert len(queue) == 0
