"""Tests wiring a TimerService into a FrameLoop."""

from cadence import FrameLoop
from cadence_timer import TimerConfig, TimerService, make_timer_system


def make_loop(duration=50):
    loop = FrameLoop(duration)
    service = TimerService(config=TimerConfig.from_clock(loop.clock))
    loop.add_system(make_timer_system(service))
    return loop, service


def test_system_advances_timers():
    loop, service = make_loop()
    fired = []
    service.delay(lambda p: fired.append(p["frame"]), 100)
    loop.run(2)
    assert fired == []
    loop.run(1)
    assert fired == [3]


def test_config_follows_loop_frame():
    loop, service = make_loop(50)
    assert service.repeat(lambda p: None, 10).duration == 50


def test_loop_stop_rewinds_timers():
    loop, service = make_loop()
    unit = service.repeat(lambda p: None, 50)
    loop.run(3)
    assert unit.count == 3

    loop.stop()
    loop.run(1)
    assert unit.count == 0
    loop.run(1)
    assert unit.count == 1


def test_late_frame_reaches_timers_as_skipped():
    loop, service = make_loop()
    payloads = []
    service.repeat(payloads.append, 100)
    loop.run(1)
    loop.step(350)
    assert payloads[-1]["skipped_count"] == 2
    assert payloads[-1]["frame"] == 8
