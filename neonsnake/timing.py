"""
timing.py — Fixed-step accumulator.

Turns the variable-rate frame timestamps delivered by the render loop
into a deterministic stream of fixed-interval logic ticks.

Usage:
    dt, dt_factor = acc.frame(now_ms)
    acc.add(dt)
    for _ in acc.ticks():
        session_tick()
"""

from collections.abc import Iterator

from .config import MAX_FRAME_DELTA, REFERENCE_FRAME


class FixedStepAccumulator:
    """Capped frame deltas in, whole logic ticks out."""

    def __init__(
        self,
        interval: float,
        max_delta: float = MAX_FRAME_DELTA,
        reference_frame: float = REFERENCE_FRAME,
    ):
        self.interval: float = interval
        self.max_delta = max_delta
        self.reference_frame = reference_frame
        self.value: float = 0.0
        self._last_time: float | None = None

    def frame(self, timestamp: float) -> tuple[float, float]:
        """
        Register a new frame timestamp.
        Returns (dt, dt_factor): the capped delta since the previous frame
        and that delta normalised to one reference frame.
        """
        if self._last_time is None:
            self._last_time = timestamp
        dt = min(self.max_delta, max(0.0, timestamp - self._last_time))
        self._last_time = timestamp
        return dt, dt / self.reference_frame

    def add(self, dt: float) -> None:
        self.value += dt

    def ticks(self) -> Iterator[None]:
        """
        Yield once per due tick.  The interval is re-read after every
        tick, so a tick that changes the speed affects the remainder.
        """
        while self.interval > 0 and self.value >= self.interval:
            yield
            self.value = max(0.0, self.value - self.interval)

    def reset(self) -> None:
        """Drop unconsumed time (start / restart)."""
        self.value = 0.0
