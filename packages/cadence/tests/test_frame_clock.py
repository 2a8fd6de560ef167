"""Tests for Clock frame accounting."""

import pytest

from cadence.clock import Clock


def test_default_is_sixty_fps():
    clock = Clock()
    assert abs(clock.duration - 1000 / 60) < 1e-9
    assert clock.frame == 0


def test_millisecond_duration_floored():
    assert Clock(10).duration == 16
    assert Clock(40).duration == 40


def test_fps_string():
    assert Clock("50fps").duration == 20
    assert Clock("25 FPS").duration == 40


@pytest.mark.parametrize("bad", ["0fps", "fast", "fps"])
def test_invalid_duration_raises(bad):
    with pytest.raises(ValueError):
        Clock(bad)


def test_advance_zero_moves_one_frame():
    clock = Clock(20)
    assert clock.advance(0) == 1
    assert clock.frame == 1
    assert clock.skipped_frames == 0
    assert clock.fps == 0


def test_advance_late_frame_skips():
    clock = Clock(20)
    assert clock.advance(40) == 2
    assert clock.frame == 2
    assert clock.skipped_frames == 1
    assert clock.fps == 25


def test_advance_rounds_to_nearest_frame():
    clock = Clock(20)
    assert clock.advance(25) == 1
    assert clock.advance(31) == 2
    assert clock.frame == 3


def test_reset():
    clock = Clock(20)
    clock.advance(100)
    clock.reset()
    assert clock.frame == 0
    assert clock.skipped_frames == 0
    assert clock.fps == 0


def test_context_carries_frame_state():
    clock = Clock(20)
    clock.advance(40)
    calls = []
    ctx = clock.context(40.4, lambda: calls.append(1))
    assert ctx.frame == 2
    assert ctx.frame_duration == 40
    assert ctx.skipped_frames == 1
    assert ctx.fps == 25
    ctx.request_stop()
    assert calls == [1]
