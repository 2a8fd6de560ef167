"""TimerService - factory facade over one TimerList."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from cadence_timer.animation import Animation
from cadence_timer.config import TimerConfig
from cadence_timer.cycle import Cycle
from cadence_timer.delay import Delay
from cadence_timer.queue import Queue
from cadence_timer.registry import TimerList
from cadence_timer.repeat import Repeat
from cadence_timer.timeline import Timeline
from cadence_timer.transition import Transition

_A = TypeVar("_A", bound=Animation)


class TimerService:
    """Creates timers bound to its registry and forwards the loop's ticks.

    Every factory returns the unit already registered, and already playing
    unless ``use_auto_start=False`` was passed.
    """

    def __init__(
        self,
        registry: TimerList | None = None,
        config: TimerConfig | None = None,
    ) -> None:
        self._registry = registry if registry is not None else TimerList()
        self._config = config if config is not None else TimerConfig()

    @property
    def registry(self) -> TimerList:
        return self._registry

    @property
    def config(self) -> TimerConfig:
        return self._config

    def run(self, frame: int, frame_duration: int = 0) -> None:
        self._registry.run(frame, frame_duration)

    def stop_all(self) -> None:
        self._registry.stop_all()

    def remove_all(self) -> None:
        self._registry.remove_all()

    def register(self, animation: _A) -> _A:
        """Bind a unit built elsewhere to this service's registry."""
        animation.set_timer_list(self._registry)
        return animation

    def delay(self, callback: Any, duration: Any, **options: Any) -> Delay:
        return self.register(Delay(callback, duration, config=self._config, **options))

    def repeat(self, callback: Any, duration: Any, **options: Any) -> Repeat:
        return self.register(Repeat(callback, duration, config=self._config, **options))

    def transition(self, callback: Any, duration: Any, **options: Any) -> Transition:
        return self.register(Transition(callback, duration, config=self._config, **options))

    def cycle(self, callback: Any, duration: Any, **options: Any) -> Cycle:
        return self.register(Cycle(callback, duration, config=self._config, **options))

    def queue(self, **options: Any) -> Queue:
        return self.register(Queue(config=self._config, **options))

    def timeline(self, entries: Iterable[tuple] | None = None, **options: Any) -> Timeline:
        return self.register(Timeline(entries, config=self._config, **options))
