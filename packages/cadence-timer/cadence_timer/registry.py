"""TimerList - the active set of playing units, dispatched once per tick."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from cadence_timer.animation import Animation

logger = logging.getLogger(__name__)


class TimerList:
    """Ordered registry of playing animations, newest first.

    ``run`` walks a snapshot from the oldest entry to the newest. A unit
    stopped, paused or removed by an earlier callback in the same pass is
    skipped rather than dispatched, and units added during a pass are first
    dispatched on the next tick.
    """

    def __init__(self) -> None:
        self._units: list[Animation] = []
        self._members: set[int] = set()

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, unit: object) -> bool:
        return id(unit) in self._members

    def __iter__(self) -> Iterator[Animation]:
        return iter(list(self._units))

    def add(self, unit: Animation) -> None:
        if id(unit) in self._members:
            return
        self._units.insert(0, unit)
        self._members.add(id(unit))

    def remove(self, unit: Animation) -> None:
        for i, item in enumerate(self._units):
            if item is unit:
                del self._units[i]
                self._members.discard(id(unit))
                return

    def remove_all(self) -> None:
        """Forget every unit without stopping it or firing events."""
        self._units = []
        self._members = set()

    def stop_all(self) -> None:
        """Stop every unit, oldest first, firing each ``stop`` event."""
        snapshot = list(self._units)
        for i in range(len(snapshot) - 1, -1, -1):
            snapshot[i].stop()

    def run(self, frame: int, frame_duration: int = 0) -> None:
        snapshot = list(self._units)
        for i in range(len(snapshot) - 1, -1, -1):
            unit = snapshot[i]
            if id(unit) not in self._members:
                continue
            if unit.is_playing:
                unit.run(frame, frame_duration)
            else:
                logger.debug("pruning inactive %r", unit)
                self.remove(unit)
