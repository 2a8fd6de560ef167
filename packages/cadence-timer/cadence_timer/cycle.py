"""Cycle - steps a value from ``from_`` to ``to`` repeatedly, mostly for sprite frames."""
from __future__ import annotations

import logging
import math
import re
from typing import Any

from cadence_timer.animation import Animation
from cadence_timer.config import TimerConfig
from cadence_timer.types import coerce_duration

logger = logging.getLogger(__name__)

_FPS = re.compile(r"^\s*(\d+)\s*fps\s*$", re.IGNORECASE)


def _number(value: float) -> float | int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class Cycle(Animation):
    """Spreads one pass over ``from_`` .. ``to`` evenly across the duration.

    timeline ------------------------------------>
    action   *-duration-* *-duration-* *-duration-*

    The duration may be given as ``"<n>fps"``, in which case one pass
    lasts ``1000 / n`` ms per step value. With ``value_set`` the unit walks
    the given list instead and the callback value is the list entry.
    Late ticks skip values the same way Repeat skips intervals.
    """

    EVENTS = Animation.EVENTS + ("end",)
    DEFAULTS = {
        "from_": 0,
        "to": 0,
        "step": 1,
        "loop": 0,
        "set": "sprite_x",
        "use_real_time": True,
        "value_set": None,
        "start": None,
    }

    def __init__(
        self,
        callback: Any,
        duration: Any,
        *,
        config: TimerConfig | None = None,
        **options: Any,
    ) -> None:
        value_set = options.get("value_set")
        if value_set:
            options.update(from_=0, to=len(value_set) - 1, step=1)
        super().__init__(callback, duration, config=config, **options)
        self.option_setter("value_set", self._on_value_set)
        self.option_setter("from_", lambda _: self._apply_fps())
        self.option_setter("to", lambda _: self._apply_fps())
        self.reset()

    def _on_value_set(self, value_set: Any) -> None:
        if value_set:
            self.option({"from_": 0, "to": len(value_set) - 1, "step": 1})

    def set_duration(self, duration: Any) -> None:
        match = _FPS.match(duration) if isinstance(duration, str) else None
        if match is None:
            self._fps: int | None = None
            self._duration = coerce_duration(duration)
            return
        self._fps = int(match.group(1))
        if self._fps <= 0:
            raise ValueError("fps must be positive")
        self._apply_fps()

    def _apply_fps(self) -> None:
        if self._fps is None:
            return
        frames = (self.option("to") - self.option("from_")) + 1
        self._duration = round(1000 / self._fps * frames)

    @property
    def count(self) -> int:
        return self._count

    @property
    def cycle(self) -> int:
        return self._cycle

    @property
    def value(self) -> Any:
        value_set = self.option("value_set")
        if value_set:
            return value_set[int(self._value)]
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = value

    def reset(self) -> None:
        self._count = 0
        self._cycle = 0
        self._cycle_before = 0
        self._last_frame: int | None = None
        self._running_time = 0
        self._last_fire_time = 0
        start = self.option("start")
        base = start if start is not None else self.option("from_")
        self._value = base - self.option("step")

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
        start, end, step = self.option("from_"), self.option("to"), self.option("step")
        total = _number((end - start) / step)
        term = self._duration / total if total else math.inf
        self._running_time += frame_duration or 0

        skipped_count = 0
        if self.option("use_real_time") and term > 0:
            elapsed = self._running_time - self._last_fire_time
            skipped_count = max(1, math.floor(elapsed / term)) - 1

        if not (first or self._last_fire_time + term <= self._running_time):
            return

        if self._cycle_before != self._cycle:
            self.fire_event("end", count=self._cycle)

        loop = self.option("loop")
        if loop and self._cycle >= loop:
            self.complete()
            return

        if self._value == end:
            self._value = start - step

        self._value += step * (1 + skipped_count)
        self._count += 1 + skipped_count
        self._cycle_before = self._cycle

        if (self._value >= end) if start <= end else (self._value <= end):
            over = _number((self._value - end) / step)
            over_cycles = math.ceil(over / (total + 1))
            over = _number(over % (total + 1))
            if over:
                self._cycle += over_cycles
                self._value = _number(start + (over - 1) * step)
            else:
                self._cycle += 1
                self._value = end

        self.trigger_callback({
            "timer": self,
            "frame": frame,
            "duration": self._duration,
            "count": self._count,
            "skipped_count": skipped_count,
            "running_time": self._running_time,
            "value": self.value,
            "cycle": self._cycle,
            "step": step,
            "from_": start,
            "to": end,
        })

        self._last_fire_time = self._running_time
