from __future__ import annotations

import random

import pytest

from neonsnake.config import PARTICLE_COLORS
from neonsnake.effects import (
    Particle,
    ScreenShake,
    advance_particles,
    cell_center,
    spawn_burst,
)


def test_burst_spawns_at_cell_centre() -> None:
    particles: list[Particle] = []
    spawn_burst(particles, (2, 3), rng=random.Random(1))

    assert len(particles) == 15
    assert cell_center((2, 3)) == (45.0, 63.0)
    for p in particles:
        assert (p.x, p.y) == (45.0, 63.0)
        assert p.life == 1.0
        assert -3 <= p.vx < 3 and -3 <= p.vy < 3
        assert 2 <= p.size < 5
        assert p.color in PARTICLE_COLORS


def test_advance_integrates_decays_and_damps() -> None:
    particles: list[Particle] = []
    spawn_burst(particles, (0, 0), count=1, rng=random.Random(2))
    p = particles[0]
    x0, vx0 = p.x, p.vx

    advance_particles(particles, 2.0)

    assert p.x == pytest.approx(x0 + vx0 * 2.0)
    assert p.vx == pytest.approx(vx0 * 0.98)
    assert p.life == pytest.approx(1 - 0.06)


def test_particle_dies_after_about_34_reference_frames() -> None:
    particles: list[Particle] = []
    spawn_burst(particles, (10, 10), count=1)
    for _ in range(33):
        advance_particles(particles, 1.0)
    assert len(particles) == 1
    assert particles[0].life == pytest.approx(0.01)

    advance_particles(particles, 1.0)
    assert particles == []


def test_decay_is_frame_rate_independent() -> None:
    a: list[Particle] = []
    b: list[Particle] = []
    spawn_burst(a, (1, 1), count=1)
    spawn_burst(b, (1, 1), count=1)
    for _ in range(10):
        advance_particles(a, 1.0)
    for _ in range(20):
        advance_particles(b, 0.5)
    assert a[0].life == pytest.approx(b[0].life)


def test_shake_decays_toward_zero() -> None:
    shake = ScreenShake()
    assert shake.offset() == (0.0, 0.0)

    shake.kick(6)
    shake.decay()
    assert shake.magnitude == pytest.approx(6 * 0.88)
    dx, dy = shake.offset(random.Random(4))
    assert abs(dx) <= shake.magnitude and abs(dy) <= shake.magnitude

    for _ in range(200):
        shake.decay()
    assert not shake.active
    assert shake.offset() == (0.0, 0.0)
