"""Timeline - starts child units at fixed offsets from its own start."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from cadence_timer.animation import Animation
from cadence_timer.config import TimerConfig
from cadence_timer.cycle import Cycle
from cadence_timer.delay import Delay
from cadence_timer.queue import Queue
from cadence_timer.repeat import Repeat
from cadence_timer.transition import Transition
from cadence_timer.types import UnknownTimerTypeError, coerce_duration

logger = logging.getLogger(__name__)

_KINDS: dict[str, type[Animation]] = {
    "delay": Delay,
    "repeat": Repeat,
    "transition": Transition,
    "cycle": Cycle,
}


class Timeline(Animation):
    """Schedule of animations keyed by start offset in ms.

    Entries given at construction are ``(start, kind, callback, duration,
    options)`` tuples, with trailing items optional. When every entry has
    started and finished a pass is over: the timeline completes once
    ``loop`` passes are done (``loop`` 0 never completes), otherwise it
    fires ``end`` and replays.
    """

    EVENTS = Animation.EVENTS + ("end",)
    DEFAULTS = {"loop": 1}

    def __init__(
        self,
        entries: Iterable[tuple] | None = None,
        *,
        config: TimerConfig | None = None,
        **options: Any,
    ) -> None:
        self._animations: dict[int, list[Animation]] = {}
        self._pending: list[int] | None = None
        self._running: list[Animation] = []
        super().__init__(None, 0, config=config, **options)
        self._cycle = 0
        for entry in entries or ():
            start, kind, *rest = entry
            callback = rest[0] if len(rest) > 0 else None
            duration = rest[1] if len(rest) > 1 else None
            entry_options = rest[2] if len(rest) > 2 else {}
            self.add(start, kind, callback, duration, **entry_options)
        self.reset()

    @property
    def running_time(self) -> int:
        return self._running_time or 0

    @property
    def cycle(self) -> int:
        return self._cycle

    def add(
        self,
        start: Any,
        kind: str | Animation,
        callback: Any = None,
        duration: Any = None,
        **options: Any,
    ) -> Animation:
        """Schedule a unit at ``start`` ms and return it.

        ``kind`` is ``"delay"``, ``"repeat"``, ``"transition"``, ``"cycle"``,
        ``"queue"`` (built from ``options``, or from a mapping passed as
        ``callback``) or a ready-made Animation.
        """
        if isinstance(kind, Animation):
            animation = kind
        elif kind == "queue":
            if isinstance(callback, Mapping):
                options = {**callback, **options}
            animation = Queue(config=self._config, **options)
        elif kind in _KINDS:
            animation = _KINDS[kind](callback, duration, config=self._config, **options)
        else:
            raise UnknownTimerTypeError(kind)

        offset = coerce_duration(start)
        self._animations.setdefault(offset, []).append(animation)
        if self._pending is not None:
            self.reset()
        return animation

    def remove(self, start: Any, animation: Animation | None = None) -> None:
        """Remove one unit at ``start``, or every unit scheduled there."""
        offset = coerce_duration(start)
        scheduled = self._animations.get(offset)
        if not scheduled:
            return

        for item in list(scheduled):
            if animation is None or item is animation:
                item.stop()
                scheduled.remove(item)
                if item in self._running:
                    self._running.remove(item)
                if animation is not None:
                    break

        if not scheduled:
            del self._animations[offset]
            if self._pending is not None and offset in self._pending:
                self._pending.remove(offset)

    def get_animation(self, start: Any) -> list[Animation] | None:
        return self._animations.get(coerce_duration(start))

    def reset(self) -> None:
        for animation in self._running:
            animation.stop(skip_event=True)
        self._last_frame: int | None = None
        self._running_time: int | None = None
        self._cycle = 0
        self._init_timeline()

    def _init_timeline(self) -> None:
        self._pending = sorted(self._animations)
        self._running = []

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

        while self._pending and self._pending[0] <= self._running_time:
            offset = self._pending.pop(0)
            for animation in self._animations[offset]:
                self._running.append(animation)
                animation.start()

        running = self._running
        i = 0
        while i < len(running):
            animation = running[i]
            animation.run(frame, frame_duration)
            if animation.is_playing:
                i += 1
                continue
            animation.reset()
            running.pop(i)
            if self._check_complete():
                return

    def _check_complete(self) -> bool:
        """Close the pass when nothing is pending or running. True if the pass ended."""
        if self._running or self._pending:
            return False

        self._cycle += 1
        loop = self.option("loop")
        if loop and loop <= self._cycle:
            self.complete()
        else:
            self.fire_event("end", count=self._cycle)
            logger.debug("%r pass %d finished, starting over", self, self._cycle)
            self._last_frame = None
            self._running_time = None
            self._init_timeline()
        return True
