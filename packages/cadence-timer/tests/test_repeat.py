"""Tests for the Repeat interval timer."""

import pytest

from cadence_timer import Repeat, TimerConfig, TimerService


def collect(service, duration, **options):
    payloads = []
    unit = service.repeat(payloads.append, duration, **options)
    return unit, payloads


class TestRepeatInterval:
    def test_fires_on_first_tick(self):
        service = TimerService()
        _, payloads = collect(service, 100)
        service.run(1, 16)
        assert len(payloads) == 1
        assert payloads[0]["count"] == 1
        assert payloads[0]["skipped_count"] == 0

    def test_fires_every_interval(self):
        service = TimerService()
        _, payloads = collect(service, 100)
        for frame in range(1, 8):
            service.run(frame, 50)
        # Baseline tick, then every second 50ms tick.
        assert [p["frame"] for p in payloads] == [1, 3, 5, 7]
        assert [p["count"] for p in payloads] == [1, 2, 3, 4]

    def test_late_tick_reports_skipped_intervals(self):
        service = TimerService()
        unit, payloads = collect(service, 100)
        service.run(1, 16)
        service.run(2, 350)

        assert len(payloads) == 2
        assert payloads[1]["skipped_count"] == 2
        assert unit.count == 4

    def test_skipped_not_counted_without_real_time(self):
        service = TimerService()
        unit, payloads = collect(service, 100, use_real_time=False)
        service.run(1, 16)
        service.run(2, 350)
        assert payloads[1]["skipped_count"] == 2
        assert unit.count == 2

    def test_payload_fields(self):
        service = TimerService()
        unit, payloads = collect(service, 100)
        service.run(1, 0)
        service.run(2, 100)
        payload = payloads[-1]
        assert payload["timer"] is unit
        assert payload["frame"] == 2
        assert payload["duration"] == 100
        assert payload["running_time"] == 100


class TestRepeatLoop:
    def test_bounded_loop_completes(self):
        service = TimerService()
        completes = []
        unit, payloads = collect(service, 100, loop=3, on_complete=completes.append)
        for frame in range(1, 10):
            service.run(frame, 100)
        assert len(payloads) == 3
        assert len(completes) == 1
        assert not unit.is_playing
        assert unit not in service.registry

    def test_skipped_intervals_count_toward_loop(self):
        service = TimerService()
        unit, payloads = collect(service, 100, loop=3)
        service.run(1, 0)
        service.run(2, 250)
        assert len(payloads) == 2
        assert not unit.is_playing

    def test_unbounded_loop_keeps_running(self):
        service = TimerService()
        unit, payloads = collect(service, 100)
        for frame in range(1, 51):
            service.run(frame, 100)
        assert len(payloads) == 50
        assert unit.is_playing


class TestRepeatBeforeDelay:
    def test_waits_before_first_fire(self):
        service = TimerService()
        _, payloads = collect(service, 100, before_delay=200)
        service.run(1, 100)
        service.run(2, 100)
        assert payloads == []
        # Delay elapses here; the next tick fires as a fresh start.
        service.run(3, 100)
        assert payloads == []
        service.run(4, 100)
        assert [p["frame"] for p in payloads] == [4]
        service.run(5, 100)
        assert [p["frame"] for p in payloads] == [4, 5]

    def test_stop_restores_before_delay(self):
        service = TimerService()
        unit, payloads = collect(service, 100, before_delay=100)
        for frame in range(1, 4):
            service.run(frame, 100)
        assert len(payloads) == 1

        unit.stop()
        unit.start()
        service.run(10, 100)
        assert len(payloads) == 1


class TestRepeatFloor:
    def test_interval_clamped_to_default_frame(self):
        unit = Repeat(lambda p: None, 5)
        assert unit.duration == 16

    def test_interval_clamped_to_configured_frame(self):
        service = TimerService(config=TimerConfig(min_frame_duration=33))
        unit, _ = collect(service, 10)
        assert unit.duration == 33

    def test_interval_above_floor_untouched(self):
        assert Repeat(lambda p: None, 250).duration == 250

    def test_setting_duration_clamps(self):
        unit = Repeat(lambda p: None, 250)
        unit.duration = 1
        assert unit.duration == 16


def test_rewind_resets_count():
    service = TimerService()
    unit, payloads = collect(service, 100)
    service.run(4, 100)
    service.run(5, 100)
    assert unit.count == 2
    service.run(1, 100)
    assert unit.count == 0
    assert len(payloads) == 2
    service.run(2, 100)
    assert unit.count == 1


@pytest.mark.parametrize("interval,ticks,expected", [(100, 10, 10), (200, 10, 5), (300, 9, 3)])
def test_fire_count_over_many_ticks(interval, ticks, expected):
    service = TimerService()
    _, payloads = collect(service, interval)
    service.run(1, 0)
    for frame in range(2, ticks + 1):
        service.run(frame, 100)
    assert len(payloads) == expected
