"""Tests for FrameLoop stepping, hooks and stop handling."""

import logging

from cadence import FrameContext, FrameLoop


def test_step_uses_nominal_duration():
    loop = FrameLoop(20)
    seen = []
    loop.add_system(seen.append)
    ctx = loop.step()
    assert isinstance(ctx, FrameContext)
    assert seen == [ctx]
    assert ctx.frame == 1
    assert ctx.frame_duration == 20


def test_step_with_real_duration():
    loop = FrameLoop(20)
    ctx = loop.step(61)
    assert ctx.frame == 3
    assert ctx.frame_duration == 61
    assert ctx.skipped_frames == 2


def test_run_first_frame_carries_no_time():
    loop = FrameLoop(20)
    durations = []
    loop.add_system(lambda ctx: durations.append(ctx.frame_duration))
    loop.run(3)
    assert durations == [0, 20, 20]
    loop.run(1)
    assert durations[-1] == 20


def test_systems_run_in_order():
    loop = FrameLoop(20)
    order = []
    loop.add_system(lambda ctx: order.append("a"))
    loop.add_system(lambda ctx: order.append("b"))
    loop.run(2)
    assert order == ["a", "b", "a", "b"]


def test_hooks_wrap_run():
    loop = FrameLoop(20)
    events = []
    loop.on_start(lambda: events.append("start"))
    loop.on_stop(lambda: events.append("stop"))
    loop.add_system(lambda ctx: events.append(ctx.frame))
    loop.run(2)
    assert events == ["start", 1, 2, "stop"]


def test_request_stop_ends_run_early():
    loop = FrameLoop(20)
    frames = []

    def system(ctx):
        frames.append(ctx.frame)
        if ctx.frame == 3:
            ctx.request_stop()

    loop.add_system(system)
    loop.run(10)
    assert frames == [1, 2, 3]


def test_request_stop_skips_remaining_systems():
    loop = FrameLoop(20)
    calls = []
    loop.add_system(lambda ctx: ctx.request_stop())
    loop.add_system(lambda ctx: calls.append(ctx.frame))
    loop.run(5)
    assert calls == []


def test_delay_limit_stops_without_dispatch(caplog):
    loop = FrameLoop(20, delay_limit=1000)
    calls = []
    loop.add_system(calls.append)
    with caplog.at_level(logging.WARNING, logger="cadence.loop"):
        assert loop.step(1500) is None
    assert calls == []
    assert loop.clock.frame == 0
    assert "limit" in caplog.text


def test_stop_rewinds_clock():
    loop = FrameLoop(20)
    loop.run(5)
    assert loop.clock.frame == 5
    loop.stop()
    assert loop.clock.frame == 0


def test_run_forever_until_requested():
    loop = FrameLoop("100fps")
    events = []
    frames = []

    def system(ctx):
        frames.append(ctx.frame)
        if len(frames) == 3:
            ctx.request_stop()

    loop.on_stop(lambda: events.append("stop"))
    loop.add_system(system)
    loop.run_forever()

    assert len(frames) == 3
    assert frames[0] == 1
    assert events == ["stop"]
