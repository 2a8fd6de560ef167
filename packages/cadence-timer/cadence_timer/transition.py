"""Transition - interpolates between two values over the duration."""
from __future__ import annotations

import logging
from typing import Any, Callable

from cadence_tween import make_effect

from cadence_timer.animation import Animation
from cadence_timer.config import TimerConfig
from cadence_timer.types import AttributeBinding

logger = logging.getLogger(__name__)


class Transition(Animation):
    """Runs every tick, handing the callback the eased value for this moment.

    ``from_`` and ``to`` may be numbers or equal-length sequences, and
    ``effect`` an easing name, an easing function, or one per value. When
    the callback is an attribute binding and ``from_`` is omitted, the
    target's current values are read when the transition starts.

    With ``loop`` > 1 (or 0 for forever) the transition restarts from
    ``from_`` carrying over the excess time and fires ``end`` each pass.
    The final pass always delivers the exact end value before completing.
    """

    EVENTS = Animation.EVENTS + ("end",)
    DEFAULTS = {"from_": None, "to": None, "set": "", "loop": 1, "effect": "linear"}

    def __init__(
        self,
        callback: Any,
        duration: Any,
        *,
        config: TimerConfig | None = None,
        **options: Any,
    ) -> None:
        super().__init__(callback, duration, config=config, **options)
        self._last_frame: int | None = None
        self._running_time = 0
        self._count = 0
        self._cycle = 0
        self._value: Any = self.option("from_")
        self._is_array = False
        self._effects: Any = None
        self.option_setter("from_", lambda _: self.reset())
        self.option_setter("to", lambda _: self.reset())

    @property
    def value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = value

    @property
    def cycle(self) -> int:
        return self._cycle

    def start(self) -> None:
        if self.option("from_") is None and isinstance(self._callback, AttributeBinding):
            self.option("from_", self._callback.read())
        if self.option("from_") is None or self.option("to") is None:
            raise ValueError("Transition needs both 'from_' and 'to' values to start")
        if self._last_frame is None:
            self.reset()
        super().start()

    def reset(self) -> None:
        self._last_frame = None
        self._running_time = 0
        self._count = 0
        self._cycle = 0
        start = self.option("from_")
        end = self.option("to")
        self._is_array = isinstance(start, (list, tuple))
        self._value = list(start) if self._is_array else start
        if start is None or end is None:
            self._effects = None
        elif self._is_array:
            self._effects = [
                make_effect(self._effect_at(i), start[i], end[i]) for i in range(len(start))
            ]
        else:
            self._effects = make_effect(self._effect_at(None), start, end)

    def _effect_at(self, index: int | None) -> str | Callable[[float], float]:
        effect = self.option("effect")
        if index is not None and isinstance(effect, (list, tuple)):
            return effect[index]
        return effect

    def run(self, frame: int, frame_duration: int = 0) -> None:
        if self._last_frame is not None and frame < self._last_frame:
            logger.debug("%r rewound at frame %d, resetting", self, frame)
            self.reset()
            return

        if self._last_frame is None:
            self._running_time = 0
            frame_duration = 0

        self._last_frame = frame
        self._running_time += frame_duration
        self._count += 1

        if self._running_time >= self._duration:
            self._cycle += 1
            loop = self.option("loop")

            if not self._is_end_value() and loop and loop <= self._cycle:
                self._set_end_value()
            elif not loop or loop > self._cycle:
                self.fire_event("end", count=self._cycle)
                self._running_time -= self._duration
                start = self.option("from_")
                self._value = list(start) if self._is_array else start
                self._transition_value(self._running_time)
            else:
                self.complete()
                return
        elif self._running_time > 0:
            self._transition_value(self._running_time)

        self.trigger_callback({
            "timer": self,
            "frame": frame,
            "duration": self._duration,
            "cycle": self._cycle,
            "running_time": self._running_time,
            "from_": self.option("from_"),
            "to": self.option("to"),
            "value": self._value,
        })

    def _progress(self, running_time: int) -> float:
        if self._duration <= 0:
            return 1.0
        return max(0.0, min(1.0, running_time / self._duration))

    def _transition_value(self, running_time: int) -> None:
        p = self._progress(running_time)
        if self._is_array:
            self._value = [effect(p) for effect in self._effects]
        else:
            self._value = self._effects(p)

    def _end_value(self) -> Any:
        if self._is_array:
            return [effect(1.0) for effect in self._effects]
        return self._effects(1.0)

    def _is_end_value(self) -> bool:
        return self._value == self._end_value()

    def _set_end_value(self) -> None:
        self._value = self._end_value()
