"""Queue - runs child units one after another, optionally looping the sequence."""
from __future__ import annotations

import logging
from typing import Any

from cadence_signal import ComponentEvent

from cadence_timer.animation import Animation
from cadence_timer.config import TimerConfig
from cadence_timer.cycle import Cycle
from cadence_timer.delay import Delay
from cadence_timer.repeat import Repeat
from cadence_timer.transition import Transition

logger = logging.getLogger(__name__)


class Queue(Animation):
    """Sequence of animations played in the order they were added.

    Each child's ``complete`` event advances the queue. After the last child
    the queue fires ``end`` with the number of finished passes, then either
    starts over (``loop`` 0 or not yet reached) or completes. Children are
    driven by the queue itself and never join a registry.

    Example::

        service.queue(loop=2).delay(on_ready, 1000).transition(
            on_move, 500, from_=0, to=100
        )
    """

    EVENTS = Animation.EVENTS + ("end",)
    DEFAULTS = {"loop": 1}

    def __init__(self, *, config: TimerConfig | None = None, **options: Any) -> None:
        self._animations: list[Animation] = []
        self._index: int | None = None
        super().__init__(None, 0, config=config, **options)
        self.reset()

    @property
    def animations(self) -> tuple[Animation, ...]:
        return tuple(self._animations)

    @property
    def index(self) -> int | None:
        return self._index

    @property
    def count(self) -> int:
        return self._count

    # --- Building ---

    def delay(self, callback: Any, duration: Any, **options: Any) -> Queue:
        return self.add(Delay(callback, duration, config=self._config, **options))

    def repeat(self, callback: Any, duration: Any, **options: Any) -> Queue:
        return self.add(Repeat(callback, duration, config=self._config, **options))

    def transition(self, callback: Any, duration: Any, **options: Any) -> Queue:
        return self.add(Transition(callback, duration, config=self._config, **options))

    def cycle(self, callback: Any, duration: Any, **options: Any) -> Queue:
        return self.add(Cycle(callback, duration, config=self._config, **options))

    def queue(self, **options: Any) -> Queue:
        """Append a nested queue and return it so it can be filled."""
        child = Queue(config=self._config, **options)
        self.add(child)
        return child

    def add(self, animation: Animation) -> Queue:
        animation.attach("complete", self._on_complete_animation)
        self._animations.append(animation)
        return self

    def get_animation(self, index: int) -> Animation | None:
        if 0 <= index < len(self._animations):
            return self._animations[index]
        return None

    def _on_complete_animation(self, event: ComponentEvent) -> None:
        self.next()

    # --- Sequencing ---

    def next(self) -> None:
        """Select the following child, wrapping or completing after the last."""
        self._index = 0 if self._index is None else self._index + 1

        if self._index >= len(self._animations):
            self._count += 1
            self.fire_event("end", count=self._count)

            loop = self.option("loop")
            if not loop or loop > self._count:
                logger.debug("%r pass %d finished, starting over", self, self._count)
                self._index = 0
            else:
                self.complete()
                return

        animation = self._animations[self._index]
        animation.stop()
        animation.start()

    def reset(self) -> None:
        current = self._current()
        if current is not None:
            current.stop(skip_event=True)
        self._last_frame: int | None = None
        self._index = None
        self._count = 0

    def _current(self) -> Animation | None:
        if self._index is None or self._index >= len(self._animations):
            return None
        return self._animations[self._index]

    def remove_all(self) -> None:
        """Drop every child and rewind the queue."""
        self.reset()
        for animation in self._animations:
            animation.detach("complete", self._on_complete_animation)
        self._animations = []

    def remove_after(self) -> None:
        """Drop every child after the one currently playing."""
        keep = (self._index if self._index is not None else 0) + 1
        for animation in self._animations[keep:]:
            animation.detach("complete", self._on_complete_animation)
        del self._animations[keep:]

    def run(self, frame: int, frame_duration: int = 0) -> None:
        if not self._animations:
            return

        if self._last_frame is not None and frame < self._last_frame:
            logger.debug("%r rewound at frame %d, resetting", self, frame)
            self.reset()
            return

        self._last_frame = frame
        if self._index is None:
            self.next()

        current = self._current()
        if current is not None:
            current.run(frame, frame_duration)
