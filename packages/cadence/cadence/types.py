"""Shared types for the frame loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame: int
    frame_duration: int
    skipped_frames: int
    fps: int
    request_stop: Callable[[], None]


System = Callable[[FrameContext], None]
