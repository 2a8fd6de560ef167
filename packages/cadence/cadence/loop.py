"""FrameLoop - drives systems once per frame with real or nominal frame time."""

import logging
import time
from typing import Callable

from cadence.clock import Clock
from cadence.types import FrameContext, System

logger = logging.getLogger(__name__)

DELAY_LIMIT = 3 * 1000


class FrameLoop:
    """Calls every system with a FrameContext each frame.

    ``stop()`` rewinds the clock to frame 0, so timers driven by this loop
    see the next frame as a restart.
    """

    def __init__(self, duration: int | float | str = "60fps", delay_limit: float = DELAY_LIMIT) -> None:
        self._clock = Clock(duration)
        self._delay_limit = delay_limit
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[], None]] = []
        self._stop_hooks: list[Callable[[], None]] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, real_duration: float) -> FrameContext | None:
        if real_duration > self._delay_limit:
            logger.warning(
                "frame took %.0fms, over the %.0fms limit; stopping", real_duration, self._delay_limit
            )
            self._request_stop()
            return None

        self._clock.advance(real_duration)
        ctx = self._clock.context(real_duration, self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break
        return ctx

    def step(self, real_duration: float | None = None) -> FrameContext | None:
        """Run one frame. ``real_duration`` defaults to the nominal frame duration."""
        self._stop_requested = False
        if real_duration is None:
            real_duration = self._clock.duration
        return self._tick(real_duration)

    def run(self, n: int) -> None:
        """Run ``n`` frames of nominal duration; the first frame carries no time."""
        self._stop_requested = False
        for hook in self._start_hooks:
            hook()

        for i in range(n):
            self._tick(0 if i == 0 and self._clock.frame == 0 else self._clock.duration)
            if self._stop_requested:
                break

        for hook in self._stop_hooks:
            hook()

    def run_forever(self) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook()

        dt = self._clock.duration / 1000
        last: float | None = None
        while not self._stop_requested:
            start = time.monotonic()
            real_duration = 0 if last is None else (start - last) * 1000
            last = start
            self._tick(real_duration)
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        for hook in self._stop_hooks:
            hook()

    def stop(self) -> None:
        """Stop running and rewind the clock to frame 0."""
        self._request_stop()
        self._clock.reset()
        logger.debug("frame loop stopped, clock rewound")
