"""cadence - A minimal frame loop producing the (frame, frame_duration) tick contract."""

from cadence.clock import Clock
from cadence.loop import FrameLoop
from cadence.types import FrameContext, System

__all__ = [
    "FrameLoop",
    "Clock",
    "FrameContext",
    "System",
]
