"""System factory connecting a FrameLoop to a TimerService."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cadence_timer.service import TimerService

if TYPE_CHECKING:
    from cadence import FrameContext


def make_timer_system(service: TimerService) -> Callable[[FrameContext], None]:
    """Return a system that advances every timer of ``service`` each frame."""

    def timer_system(ctx: FrameContext) -> None:
        service.run(ctx.frame, ctx.frame_duration)

    return timer_system
