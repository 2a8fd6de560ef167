"""Animation - the abstract scheduling unit every timer builds on."""
from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from cadence_signal import Component

from cadence_timer.config import TimerConfig
from cadence_timer.types import (
    AbstractMethodError,
    Callback,
    Payload,
    coerce_duration,
    make_callback,
)

if TYPE_CHECKING:
    from cadence_timer.registry import TimerList

logger = logging.getLogger(__name__)


class Animation(Component):
    """Lifecycle, options, events and duration shared by all timer units.

    States are idle, playing and paused. ``start()`` moves idle or paused
    to playing, ``pause()`` keeps the run-state, ``stop()`` resets it and
    ``complete()`` is a stop that fires ``complete`` instead of ``stop``.
    While a unit has a registry it is in that registry exactly when it is
    playing.

    Subclasses set ``DEFAULTS`` for their options, extend ``EVENTS`` when
    they fire extra events, and implement ``run`` and ``reset``.
    """

    EVENTS: ClassVar[tuple[str, ...]] = ("start", "stop", "pause", "complete")
    DEFAULTS: ClassVar[dict[str, Any]] = {}

    _ids: ClassVar[itertools.count] = itertools.count(1)

    def __init__(
        self,
        callback: Any = None,
        duration: Any = 0,
        *,
        config: TimerConfig | None = None,
        **options: Any,
    ) -> None:
        super().__init__()
        self._id = next(Animation._ids)
        self._playing = False
        self._timer_list: TimerList | None = None
        self._complete_hook: Callable[[], None] | None = None
        self._config = config if config is not None else TimerConfig()
        self._duration = 0

        self.option({"use_auto_start": True, **self.DEFAULTS})
        self.option(options)
        self._callback: Callback | None = make_callback(callback, self.option("set"))
        self.set_duration(duration)
        self.set_option_event(options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, duration={self._duration})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def callback(self) -> Callback | None:
        return self._callback

    @property
    def timer_list(self) -> TimerList | None:
        return self._timer_list

    @property
    def is_playing(self) -> bool:
        return self._playing

    def set_option_event(self, options: dict[str, Any] | None) -> None:
        """Attach ``on_<event>`` options as handlers for the events this unit fires."""
        if not options:
            return
        for event in self.EVENTS:
            handler = options.get(f"on_{event}")
            if handler is not None:
                self.attach(event, handler)

    def on_completion(self, hook: Callable[[], None] | None) -> None:
        """Set a hook run by ``complete()`` before the unit stops."""
        self._complete_hook = hook

    # --- Duration ---

    def set_duration(self, duration: Any) -> None:
        self._duration = coerce_duration(duration)

    @property
    def duration(self) -> int:
        return self._duration

    @duration.setter
    def duration(self, value: Any) -> None:
        self.set_duration(value)

    # --- Callbacks ---

    def trigger_callback(self, payload: Payload) -> None:
        if self._callback is not None:
            self._callback(payload)

    # --- Lifecycle ---

    def set_timer_list(self, timer_list: TimerList | None) -> None:
        """Bind the unit to a registry and start it when ``use_auto_start`` is set.

        A playing unit moves from its previous registry to the new one.
        """
        previous = self._timer_list
        if previous is not None and previous is not timer_list:
            previous.remove(self)
        self._timer_list = timer_list
        if self._playing and timer_list is not None:
            timer_list.add(self)
        if self.option("use_auto_start"):
            self.start()

    def start(self) -> None:
        if self._playing:
            return
        self._playing = True
        if self._timer_list is not None:
            self._timer_list.add(self)
        logger.debug("%r started", self)
        self.fire_event("start")

    def stop(self, skip_event: bool = False) -> None:
        if not self._playing:
            return
        if self._timer_list is not None:
            self._timer_list.remove(self)
        self._playing = False
        self.reset()
        logger.debug("%r stopped", self)
        if not skip_event:
            self.fire_event("stop")

    def pause(self) -> None:
        if not self._playing:
            return
        self._playing = False
        if self._timer_list is not None:
            self._timer_list.remove(self)
        logger.debug("%r paused", self)
        self.fire_event("pause")

    def complete(self) -> None:
        if not self._playing:
            return
        if self._complete_hook is not None:
            self._complete_hook()
        self.stop(skip_event=True)
        logger.debug("%r completed", self)
        self.fire_event("complete")

    # --- Abstract ---

    def run(self, frame: int, frame_duration: int = 0) -> None:
        raise AbstractMethodError(type(self).__name__, "run")

    def reset(self) -> None:
        raise AbstractMethodError(type(self).__name__, "reset")
