from __future__ import annotations

import pytest

from neonsnake.timing import FixedStepAccumulator


def test_first_frame_has_zero_delta() -> None:
    acc = FixedStepAccumulator(interval=100)
    assert acc.frame(5000) == (0.0, 0.0)


def test_frame_delta_is_capped_after_a_stall() -> None:
    acc = FixedStepAccumulator(interval=100)
    acc.frame(0)
    dt, dt_factor = acc.frame(2000)
    assert dt == 50.0
    assert dt_factor == pytest.approx(50.0 / 16.67)

    dt, _ = acc.frame(2016)
    assert dt == 16.0


def test_ticks_fire_once_per_whole_interval() -> None:
    acc = FixedStepAccumulator(interval=100)
    acc.add(250)
    assert sum(1 for _ in acc.ticks()) == 2
    assert acc.value == 50

    acc.add(49)
    assert sum(1 for _ in acc.ticks()) == 0
    acc.add(1)
    assert sum(1 for _ in acc.ticks()) == 1
    assert acc.value == 0


def test_interval_change_during_a_tick_applies_to_the_remainder() -> None:
    acc = FixedStepAccumulator(interval=100)
    acc.add(200)
    count = 0
    for _ in acc.ticks():
        count += 1
        acc.interval = 50
    assert count == 4
    assert acc.value == 0


def test_accumulator_never_drains_negative() -> None:
    acc = FixedStepAccumulator(interval=50)
    acc.add(60)
    for _ in acc.ticks():
        acc.interval = 100
    assert acc.value == 0


def test_logic_rate_is_independent_of_frame_rate() -> None:
    slow, fast = FixedStepAccumulator(interval=120), FixedStepAccumulator(interval=120)
    slow_ticks = fast_ticks = 0
    for t in range(0, 1201, 40):
        dt, _ = slow.frame(t)
        slow.add(dt)
        slow_ticks += sum(1 for _ in slow.ticks())
    for t in range(0, 1201, 8):
        dt, _ = fast.frame(t)
        fast.add(dt)
        fast_ticks += sum(1 for _ in fast.ticks())
    assert slow_ticks == fast_ticks == 10


def test_reset_drops_unconsumed_time() -> None:
    acc = FixedStepAccumulator(interval=100)
    acc.add(90)
    acc.reset()
    acc.add(20)
    assert sum(1 for _ in acc.ticks()) == 0
