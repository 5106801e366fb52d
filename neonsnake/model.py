"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction   — immutable (dx, dy) value object
    GraceTimer  — deadline that forgives a single lethal step
    Snake       — body, direction, grace timers, movement state machine
    Food        — position + pulse phase
    RunState    — score, level, speed, screen state
    GameSession — top-level model; owns snake, food, queue, particles
"""

import enum
import logging
import random
from collections import deque

from .config import (
    COLS, ROWS, CELL,
    DIFFICULTIES, DEFAULT_DIFFICULTY,
    FOOD_REWARD, MIN_INTERVAL,
    WALL_GRACE_TIME, TAIL_GRACE_TIME, DEATH_SHAKE_MS,
    START_CELL, START_MARGIN,
    PARTICLE_FOOD_COUNT, PARTICLE_DEATH_COUNT,
    SHAKE_EAT, SHAKE_REJECT, SHAKE_DEATH,
    STATE_MENU, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
)
from .effects import Particle, ScreenShake, advance_particles, spawn_burst
from .input_queue import EnqueueResult, InputQueue
from .storage import Preferences
from .timing import FixedStepAccumulator

logger = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        if (x, y) == (0, 0):
            raise ValueError("Direction cannot be the zero vector")
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


class SnakeState(enum.Enum):
    ALIVE = "alive"
    WALL_GRACE = "wall_grace"
    TAIL_GRACE = "tail_grace"
    DEAD = "dead"


class StepResult(enum.Enum):
    MOVED = "moved"
    WALL_BLOCKED = "wall_blocked"
    TAIL_BLOCKED = "tail_blocked"
    DEAD = "dead"


# ────────────────────────── GraceTimer ───────────────────────────
class GraceTimer:
    """
    A pending-death deadline.  Armed on the first lethal step, cancelled
    by the first safe one, polled by the session against the frame clock.
    """

    def __init__(self, duration: float):
        self.duration = duration
        self.active: bool = False
        self.deadline: float = 0.0

    def arm(self, now: float) -> bool:
        """Start the countdown.  Returns False if it was already running."""
        if self.active:
            return False
        self.active = True
        self.deadline = now + self.duration
        return True

    def cancel(self) -> bool:
        was_active = self.active
        self.active = False
        return was_active

    def expired(self, now: float) -> bool:
        return self.active and now >= self.deadline


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Pure game data for the snake.
    No rendering. No input handling.

    render_pos mirrors body one-to-one: the pixel position each segment
    is currently drawn at, eased toward its cell by smooth().
    """

    def __init__(self, start_x: int, start_y: int, start_dir: Direction = Direction.RIGHT):
        self.body: deque[tuple[int, int]] = deque([(start_x, start_y)])
        self.render_pos: deque[list[float]] = deque([[start_x * CELL, start_y * CELL]])
        self.dir: Direction = start_dir
        self.next_dir: Direction = start_dir
        self.wall_grace = GraceTimer(WALL_GRACE_TIME)
        self.tail_grace = GraceTimer(TAIL_GRACE_TIME)
        self.dead: bool = False

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    @property
    def state(self) -> SnakeState:
        if self.dead:
            return SnakeState.DEAD
        if self.wall_grace.active:
            return SnakeState.WALL_GRACE
        if self.tail_grace.active:
            return SnakeState.TAIL_GRACE
        return SnakeState.ALIVE

    def __len__(self) -> int:
        return len(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def step(self, now: float, cols: int = COLS, rows: int = ROWS) -> StepResult:
        """
        Commit the pending direction and try to advance one cell.

        A lethal step (wall or own body) never mutates the body: it arms
        the matching grace timer and the snake holds position.  The next
        safe step cancels the timer.  On success the new head is
        prepended; the caller decides whether the tail is trimmed.
        """
        if self.dead:
            return StepResult.DEAD

        self.dir = self.next_dir
        hx, hy = self.head
        nx, ny = hx + self.dir.x, hy + self.dir.y

        if not (0 <= nx < cols and 0 <= ny < rows):
            if self.wall_grace.arm(now):
                logger.debug("wall grace armed at %s heading %r", self.head, self.dir)
            return StepResult.WALL_BLOCKED
        if self.wall_grace.cancel():
            logger.debug("wall grace cancelled")

        if (nx, ny) in self.body:
            if self.tail_grace.arm(now):
                logger.debug("tail grace armed at %s heading %r", self.head, self.dir)
            return StepResult.TAIL_BLOCKED
        if self.tail_grace.cancel():
            logger.debug("tail grace cancelled")

        self.body.appendleft((nx, ny))
        self.render_pos.appendleft(list(self.render_pos[0]))
        return StepResult.MOVED

    def trim_tail(self) -> None:
        self.body.pop()
        self.render_pos.pop()

    def poll_grace(self, now: float) -> bool:
        """
        Check both grace deadlines.  Returns True exactly once: on the
        poll that finds an expired, still-active timer.
        """
        if self.dead:
            return False
        if self.wall_grace.expired(now) or self.tail_grace.expired(now):
            self.dead = True
            self.cancel_grace()
            return True
        return False

    def cancel_grace(self) -> None:
        self.wall_grace.cancel()
        self.tail_grace.cancel()

    def smooth(self, factor: float) -> None:
        """Ease each segment's drawn position toward its cell."""
        for (cx, cy), pos in zip(self.body, self.render_pos):
            pos[0] += (cx * CELL - pos[0]) * factor
            pos[1] += (cy * CELL - pos[1]) * factor

    # ── Queries ──────────────────────────────────────────────────

# ──────────────────────────── Food ───────────────────────────────
class Food:
    """Single food cell plus the phase of its pulse animation."""

    def __init__(self, position: tuple[int, int] = (5, 5)):
        self.position = position
        self.pulse: float = 0.0

    def place(
        self,
        body,
        cols: int = COLS,
        rows: int = ROWS,
        rng: random.Random = random,
    ) -> tuple[int, int]:
        occupied = set(body)
        while True:
            pos = (rng.randrange(cols), rng.randrange(rows))
            if pos not in occupied:
                break
        self.position = pos
        self.pulse = 0.0
        return pos


# ─────────────────────────── RunState ────────────────────────────
class RunState:
    """Score, level and speed of the current run, plus the screen state."""

    def __init__(self, difficulty: int = DEFAULT_DIFFICULTY):
        self.difficulty: int = difficulty
        self.state: str = STATE_MENU
        self.score: int = 0
        self.level: int = 1
        self.base_interval: int = DIFFICULTIES[difficulty]["start_interval"]
        self.interval: int = self.base_interval

    @property
    def diff_config(self) -> dict:
        return DIFFICULTIES[self.difficulty]

    @property
    def started(self) -> bool:
        return self.state in (STATE_PLAYING, STATE_PAUSED)

    @property
    def paused(self) -> bool:
        return self.state == STATE_PAUSED

    def reset(self) -> None:
        self.score = 0
        self.level = 1
        self.base_interval = self.diff_config["start_interval"]
        self.interval = self.base_interval

    def add_score(self, points: int = FOOD_REWARD) -> bool:
        """
        Add points and recompute the level.
        Returns True if the level went up (and the interval shrank).
        """
        self.score += points
        cfg = self.diff_config
        new_level = self.score // cfg["threshold"] + 1
        if new_level <= self.level:
            return False
        self.level = new_level
        self.interval = max(
            MIN_INTERVAL,
            self.base_interval - self.level * cfg["interval_step"],
        )
        return True


# ───────────────────────── Sound stand-in ────────────────────────
class SilentSounds:
    """Sound capability that does nothing (headless runs and tests)."""

    def play_eat(self) -> None:
        pass

    def play_crash(self) -> None:
        pass


# ────────────────────────── GameSession ──────────────────────────
class GameSession:
    """
    Top-level model.  Owns all game state.
    The controller calls frame() once per rendered frame with a
    monotonic millisecond timestamp; logic ticks run at the fixed
    interval of the current difficulty and level.
    """

    def __init__(
        self,
        sounds=None,
        prefs: Preferences | None = None,
        rng: random.Random | None = None,
        cols: int = COLS,
        rows: int = ROWS,
    ):
        self.sounds = sounds if sounds is not None else SilentSounds()
        self.prefs = prefs if prefs is not None else Preferences()
        self.rng = rng if rng is not None else random.Random()
        self.cols = cols
        self.rows = rows

        self.run = RunState()
        self.clock = FixedStepAccumulator(self.run.interval)
        self.inputs = InputQueue()
        self.shake = ScreenShake()
        self.particles: list[Particle] = []
        self.now: float = 0.0
        self.death_shake_until: float = 0.0
        self.snake = Snake(min(START_CELL[0], cols - 1), min(START_CELL[1], rows - 1))
        self.food = Food()
        self.food.place(self.snake.body, cols, rows, self.rng)

    # ── Read-only views ──────────────────────────────────────────
    @property
    def state(self) -> str:
        return self.run.state

    @property
    def high_score(self) -> int:
        return self.prefs.high_score

    @property
    def death_shaking(self) -> bool:
        return self.now < self.death_shake_until

    # ── Public API ───────────────────────────────────────────────
    def set_difficulty(self, level: int) -> None:
        if level in DIFFICULTIES:
            self.run.difficulty = level

    def start(self) -> None:
        """Leave the menu and begin a run with the selected difficulty."""
        if self.run.state != STATE_MENU:
            return
        self._begin()

    def restart(self) -> None:
        self._reset_entities()
        self._begin()

    def return_to_menu(self) -> None:
        self._reset_entities()
        self.run.state = STATE_MENU

    def toggle_pause(self) -> None:
        if self.run.state == STATE_PLAYING:
            self.run.state = STATE_PAUSED
        elif self.run.state == STATE_PAUSED:
            self.run.state = STATE_PLAYING

    def steer(self, direction: Direction) -> EnqueueResult | None:
        """Queue a direction intent.  Ignored unless a run is in progress."""
        if not self.run.started:
            return None
        result = self.inputs.enqueue(direction, self.snake, self.cols, self.rows)
        if result is EnqueueResult.REJECTED_REVERSAL:
            self.shake.kick(SHAKE_REJECT)
        return result

    def frame(self, now: float) -> None:
        """Advance everything by one rendered frame.  Called every frame."""
        self.now = now
        dt, dt_factor = self.clock.frame(now)

        if self.run.started:
            if not self.run.paused:
                self.clock.add(dt)
                for _ in self.clock.ticks():
                    self._tick()
            if self.snake.poll_grace(now):
                self._game_over()

        advance_particles(self.particles, dt_factor)
        self.shake.decay()

    # ── Private helpers ──────────────────────────────────────────
    def _begin(self) -> None:
        self.run.reset()
        self.clock.interval = self.run.interval
        self.clock.reset()
        self.run.state = STATE_PLAYING
        logger.info("run started on %s", self.run.diff_config["label"])

    def _start_cell(self) -> tuple[int, int]:
        # The wall margin shrinks on small boards so the range is never empty
        margin_x = min(START_MARGIN, (self.cols - 1) // 2)
        margin_y = min(START_MARGIN, (self.rows - 1) // 2)
        return (margin_x + self.rng.randrange(self.cols - 2 * margin_x),
                margin_y + self.rng.randrange(self.rows - 2 * margin_y))

    def _reset_entities(self) -> None:
        self.snake = Snake(*self._start_cell())
        self.inputs.clear()
        self.run.reset()
        self.particles.clear()
        self.shake.reset()
        self.death_shake_until = 0.0
        self.food.place(self.snake.body, self.cols, self.rows, self.rng)
        self.clock.interval = self.run.interval
        self.clock.reset()

    def _tick(self) -> None:
        if self.snake.dead:
            return
        self.inputs.dequeue_one(self.snake)
        if self.snake.step(self.now, self.cols, self.rows) is not StepResult.MOVED:
            return

        if self.snake.head == self.food.position:
            self._eat()
        else:
            self.snake.trim_tail()

    def _eat(self) -> None:
        spawn_burst(self.particles, self.snake.head, PARTICLE_FOOD_COUNT, self.rng)
        self.shake.kick(SHAKE_EAT)
        self.sounds.play_eat()
        self.food.place(self.snake.body, self.cols, self.rows, self.rng)
        if self.run.add_score(FOOD_REWARD):
            self.clock.interval = self.run.interval
            logger.info("level %d, tick interval %d ms", self.run.level, self.run.interval)

    def _game_over(self) -> None:
        self.shake.kick(SHAKE_DEATH)
        self.death_shake_until = self.now + DEATH_SHAKE_MS
        spawn_burst(self.particles, self.snake.head, PARTICLE_DEATH_COUNT, self.rng)
        self.sounds.play_crash()
        if self.run.score > self.prefs.high_score:
            self.prefs.high_score = self.run.score
            self.prefs.save()
            logger.info("new high score %d", self.run.score)
        self.run.state = STATE_OVER
        logger.info("game over: score %d, level %d", self.run.score, self.run.level)
