"""
effects.py — Transient visual effects: particles and screen shake.

Pure data and arithmetic; the View decides how they look.
All rates are expressed per reference frame and scaled by dt_factor,
so effects play at the same speed on a 30 Hz or a 144 Hz display.
"""

import random

from .config import (
    CELL,
    PARTICLE_COLORS, PARTICLE_FOOD_COUNT, PARTICLE_SPEED,
    PARTICLE_DECAY, PARTICLE_DAMPING,
    SHAKE_DECAY, SHAKE_EPSILON,
)


# ─────────────────────────── Particle ────────────────────────────
class Particle:
    """Visual-only data; advanced by the session, rendered by the view."""

    __slots__ = ("x", "y", "vx", "vy", "life", "size", "color")

    def __init__(self, x: float, y: float, rng: random.Random = random):
        self.x = x
        self.y = y
        self.vx = (rng.random() - 0.5) * PARTICLE_SPEED
        self.vy = (rng.random() - 0.5) * PARTICLE_SPEED
        self.life: float = 1.0
        self.size: float = 2 + rng.random() * 3
        self.color = rng.choice(PARTICLE_COLORS)

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self, dt_factor: float) -> None:
        self.x    += self.vx * dt_factor
        self.y    += self.vy * dt_factor
        self.life -= PARTICLE_DECAY * dt_factor
        self.vx   *= PARTICLE_DAMPING
        self.vy   *= PARTICLE_DAMPING


def cell_center(cell: tuple[int, int]) -> tuple[float, float]:
    """Pixel centre of a grid cell, in game-area coordinates."""
    return cell[0] * CELL + CELL / 2, cell[1] * CELL + CELL / 2


def spawn_burst(
    particles: list[Particle],
    cell: tuple[int, int],
    count: int = PARTICLE_FOOD_COUNT,
    rng: random.Random = random,
) -> None:
    x, y = cell_center(cell)
    for _ in range(count):
        particles.append(Particle(x, y, rng))


def advance_particles(particles: list[Particle], dt_factor: float) -> None:
    """Integrate, decay and damp every particle; drop the dead ones in place."""
    for p in particles:
        p.update(dt_factor)
    particles[:] = [p for p in particles if p.alive]


# ────────────────────────── ScreenShake ──────────────────────────
class ScreenShake:
    """A magnitude that jolts up on events and decays every frame."""

    def __init__(self):
        self.magnitude: float = 0.0

    @property
    def active(self) -> bool:
        return self.magnitude > SHAKE_EPSILON

    def kick(self, magnitude: float) -> None:
        self.magnitude = magnitude

    def decay(self) -> None:
        if self.active:
            self.magnitude *= SHAKE_DECAY

    def offset(self, rng: random.Random = random) -> tuple[float, float]:
        if not self.active:
            return 0.0, 0.0
        return (
            (rng.random() * 2 - 1) * self.magnitude,
            (rng.random() * 2 - 1) * self.magnitude,
        )

    def reset(self) -> None:
        self.magnitude = 0.0
