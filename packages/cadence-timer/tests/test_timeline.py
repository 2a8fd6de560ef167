"""Tests for Timeline offset scheduling."""

import pytest

from cadence_timer import Delay, Queue, Timeline, TimerService, UnknownTimerTypeError


def recorder(log, name):
    return lambda payload: log.append((name, payload["frame"]))


def test_units_start_at_their_offsets():
    service = TimerService()
    log = []
    timeline = service.timeline([
        (0, "delay", recorder(log, "a"), 100),
        (200, "delay", recorder(log, "b"), 0),
    ])
    for frame in range(1, 8):
        service.run(frame, 50)

    assert log == [("a", 3), ("b", 5)]
    assert not timeline.is_playing
    assert timeline not in service.registry


def test_bounded_loop_fires_end_between_passes():
    service = TimerService()
    log = []
    ends = []
    timeline = service.timeline(
        [(0, "delay", recorder(log, "a"), 0)],
        loop=2,
        on_end=lambda e: ends.append(e.count),
    )
    for frame in range(1, 6):
        service.run(frame, 16)

    assert [name for name, _ in log] == ["a", "a"]
    assert ends == [1]
    assert not timeline.is_playing


def test_add_returns_unit_and_coerces_offset():
    timeline = Timeline()
    unit = timeline.add("250ms", "repeat", lambda p: None, 100, loop=2)
    assert timeline.get_animation(250) == [unit]
    assert unit.option("loop") == 2


def test_add_existing_animation():
    timeline = Timeline()
    delay = Delay(lambda p: None, 10)
    assert timeline.add(0, delay) is delay
    assert timeline.get_animation(0) == [delay]


def test_add_queue_kind():
    timeline = Timeline()
    queue = timeline.add(100, "queue", {"loop": 2})
    assert isinstance(queue, Queue)
    assert queue.option("loop") == 2


def test_unknown_kind_raises():
    timeline = Timeline()
    with pytest.raises(UnknownTimerTypeError):
        timeline.add(0, "tween", lambda p: None, 100)


def test_remove_single_and_all():
    timeline = Timeline()
    a = timeline.add(0, "delay", lambda p: None, 10)
    b = timeline.add(0, "delay", lambda p: None, 10)
    timeline.remove(0, a)
    assert timeline.get_animation(0) == [b]
    timeline.remove(0)
    assert timeline.get_animation(0) is None


def test_running_children_share_ticks():
    service = TimerService()
    log = []
    service.timeline([
        (0, "repeat", recorder(log, "r"), 100, {"loop": 3}),
        (100, "delay", recorder(log, "d"), 0),
    ])
    for frame in range(1, 6):
        service.run(frame, 100)

    assert log == [("r", 1), ("r", 2), ("d", 2), ("r", 3)]


def test_rewind_restarts_schedule():
    service = TimerService()
    log = []
    timeline = service.timeline([(100, "delay", recorder(log, "a"), 0)])
    service.run(5, 50)
    service.run(6, 50)
    service.run(1, 50)
    assert timeline.running_time == 0
    service.run(2, 50)
    service.run(3, 50)
    assert log == []
    service.run(4, 50)
    assert log == [("a", 4)]


def test_empty_timeline_keeps_playing():
    service = TimerService()
    timeline = service.timeline()
    service.run(1, 16)
    service.run(2, 16)
    assert timeline.is_playing
