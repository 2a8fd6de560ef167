"""cadence-timer - Frame-synchronized timers: delay, repeat, queue and friends."""
from __future__ import annotations

from cadence_timer.animation import Animation
from cadence_timer.config import TimerConfig
from cadence_timer.cycle import Cycle
from cadence_timer.delay import Delay
from cadence_timer.queue import Queue
from cadence_timer.registry import TimerList
from cadence_timer.repeat import Repeat
from cadence_timer.service import TimerService
from cadence_timer.systems import make_timer_system
from cadence_timer.timeline import Timeline
from cadence_timer.transition import Transition
from cadence_timer.types import (
    AbstractMethodError,
    AttributeBinding,
    FunctionCallback,
    InvalidDurationError,
    UnknownTimerTypeError,
)

__all__ = [
    "Animation",
    "Delay",
    "Repeat",
    "Queue",
    "Transition",
    "Cycle",
    "Timeline",
    "TimerList",
    "TimerService",
    "TimerConfig",
    "make_timer_system",
    "FunctionCallback",
    "AttributeBinding",
    "AbstractMethodError",
    "InvalidDurationError",
    "UnknownTimerTypeError",
]
