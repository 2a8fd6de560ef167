"""Repeat - fires its callback every interval, compensating for frame drift."""
from __future__ import annotations

import logging
import math
from typing import Any

from cadence_timer.animation import Animation
from cadence_timer.config import TimerConfig
from cadence_timer.types import coerce_duration

logger = logging.getLogger(__name__)


class Repeat(Animation):
    """Fixed-interval timer.

    timeline --------------------------------->
    action   * duration * duration * duration *

    Fires on its first tick, then whenever a full interval has elapsed
    since the previous fire. If one tick covers several intervals the
    callback runs once, reports the extra intervals as ``skipped_count``
    and, with ``use_real_time``, counts them into ``count``.

    Options: ``before_delay`` (ms before the first fire), ``loop`` (number
    of counted fires before completing, 0 repeats forever) and
    ``use_real_time``.
    """

    DEFAULTS = {"before_delay": 0, "loop": 0, "use_real_time": True}

    def __init__(
        self,
        callback: Any,
        duration: Any,
        *,
        config: TimerConfig | None = None,
        **options: Any,
    ) -> None:
        super().__init__(callback, duration, config=config, **options)
        self.reset()

    def set_duration(self, duration: Any) -> None:
        value = coerce_duration(duration)
        floor = self._config.min_frame_duration
        if value < floor:
            logger.debug("%r interval %dms raised to frame duration %dms", self, value, floor)
            value = floor
        self._duration = value

    @property
    def count(self) -> int:
        return self._count

    @property
    def running_time(self) -> int:
        return self._running_time

    def reset(self) -> None:
        self._count = 0
        self._last_frame: int | None = None
        self._running_time = 0
        self._last_fire_time = 0
        self._before_delay = self.option("before_delay")

    def run(self, frame: int, frame_duration: int = 0) -> None:
        if self._last_frame is not None and frame < self._last_frame:
            logger.debug("%r rewound at frame %d, resetting", self, frame)
            self.reset()
            return

        first = self._last_frame is None
        if first:
            self._running_time = 0
            self._last_fire_time = 0
            frame_duration = 0

        self._last_frame = frame
        self._running_time += frame_duration
        elapsed = self._running_time - self._last_fire_time
        skipped_count = max(1, math.floor(elapsed / self._duration)) - 1

        if self._count == 0 and self._before_delay:
            if self._last_fire_time + self._before_delay <= self._running_time:
                # Next tick starts over as a first tick and fires.
                self.reset()
                self._before_delay = 0
            return

        if first or self._last_fire_time + self._duration <= self._running_time:
            if self.option("use_real_time"):
                self._count += 1 + skipped_count
            else:
                self._count += 1

            self.trigger_callback({
                "timer": self,
                "frame": frame,
                "duration": self._duration,
                "count": self._count,
                "skipped_count": skipped_count,
                "running_time": self._running_time,
            })

            loop = self.option("loop")
            if loop and loop <= self._count:
                self.complete()
                return

            self._last_fire_time = self._running_time
