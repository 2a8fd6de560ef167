"""Delay - fires its callback once after the duration has elapsed."""
from __future__ import annotations

import logging
from typing import Any

from cadence_timer.animation import Animation
from cadence_timer.config import TimerConfig

logger = logging.getLogger(__name__)


class Delay(Animation):
    """One-shot timer.

    timeline ---------->
    action   duration *

    The callback receives ``{timer, frame, duration, running_time}`` and the
    unit completes right after it.
    """

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

    @property
    def running_time(self) -> int:
        return self._running_time

    def reset(self) -> None:
        self._last_frame: int | None = None
        self._running_time = 0
        self._last_fire_time = 0

    def run(self, frame: int, frame_duration: int = 0) -> None:
        if self._last_frame is not None and frame < self._last_frame:
            logger.debug("%r rewound at frame %d, resetting", self, frame)
            self.reset()
            return

        if self._last_frame is None:
            self._running_time = 0
            self._last_fire_time = 0
            frame_duration = 0

        self._last_frame = frame
        self._running_time += frame_duration

        if self._last_fire_time + self._duration <= self._running_time:
            self.trigger_callback({
                "timer": self,
                "frame": frame,
                "duration": self._duration,
                "running_time": self._running_time,
            })
            self.complete()
