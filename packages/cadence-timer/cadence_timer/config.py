"""Timer configuration injected into services and units."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cadence import Clock

DEFAULT_MIN_FRAME_DURATION = 16


@dataclass(frozen=True, slots=True)
class TimerConfig:
    """Settings shared by every unit a TimerService creates.

    ``min_frame_duration`` is the driving loop's shortest tick in ms; a
    Repeat interval is never allowed below it.
    """

    min_frame_duration: int = DEFAULT_MIN_FRAME_DURATION

    def __post_init__(self) -> None:
        if self.min_frame_duration <= 0:
            raise ValueError("min_frame_duration must be positive")

    @classmethod
    def from_clock(cls, clock: Clock) -> TimerConfig:
        return cls(min_frame_duration=math.ceil(clock.duration))
