"""Clock - frame counter with skipped-frame accounting."""

import re
from typing import Callable

from cadence.types import FrameContext

MIN_DURATION = 16

_FPS = re.compile(r"^\s*(\d+)\s*fps\s*$", re.IGNORECASE)


def parse_duration(duration: int | float | str) -> float:
    """Frame duration in ms from a number of ms (at least 16) or ``"<n>fps"``."""
    if isinstance(duration, str):
        match = _FPS.match(duration)
        if match is None:
            raise ValueError(f"Invalid frame duration {duration!r}")
        fps = int(match.group(1))
        if fps <= 0:
            raise ValueError("fps must be positive")
        return 1000 / fps
    return max(MIN_DURATION, duration)


class Clock:
    def __init__(self, duration: int | float | str = "60fps") -> None:
        self._duration = parse_duration(duration)
        self._frame = 0
        self._skipped_frames = 0
        self._fps = 0

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def skipped_frames(self) -> int:
        return self._skipped_frames

    @property
    def fps(self) -> int:
        return self._fps

    def advance(self, real_duration: float = 0) -> int:
        """Move forward by as many frames as ``real_duration`` ms covers (at least 1)."""
        step = max(1, round(real_duration / self._duration))
        self._skipped_frames += step - 1
        if real_duration > 0:
            self._fps = round(1000 / real_duration)
        self._frame += step
        return step

    def context(self, real_duration: float, stop_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame=self._frame,
            frame_duration=round(real_duration),
            skipped_frames=self._skipped_frames,
            fps=self._fps,
            request_stop=stop_fn,
        )

    def reset(self) -> None:
        self._frame = 0
        self._skipped_frames = 0
        self._fps = 0
