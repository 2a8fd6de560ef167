"""Timer Gallery - Interactive view of cadence timers.

Exercises cadence, cadence-timer, cadence-tween and cadence-signal.

Lanes:
  1-4     Transitions with different easings, looped by one Queue
  5       Repeat ticker (count and skipped intervals)
  6       Cycle stepping through sprite frames

Controls:
  Space   Pause / resume every timer
  R       Restart (rewinds the frame loop)
  Esc     Quit
"""
from __future__ import annotations

import sys
from types import SimpleNamespace

import pygame

from cadence import FrameLoop
from cadence_timer import TimerConfig, TimerService, make_timer_system
from ui.constants import BG_COLOR, EASING_NAMES, FPS, SCREEN_H, SCREEN_W
from ui.lanes import draw_frame_lane, draw_orb_lane, draw_status_bar, draw_ticker_lane

SPRITE_FRAMES = 8


class GalleryState:
    """Holds the frame loop, timer service and the values the lanes draw."""

    def __init__(self) -> None:
        self.loop = FrameLoop(f"{FPS}fps")
        self.service = TimerService(config=TimerConfig.from_clock(self.loop.clock))
        self.loop.add_system(make_timer_system(self.service))

        self.orbs = {name: SimpleNamespace(progress=0.0) for name in EASING_NAMES}
        self.sprite = SimpleNamespace(sprite_x=0)
        self.ticks = 0
        self.skipped = 0
        self.paused = False
        self._held: list = []

        self._build()

    def _build(self) -> None:
        waves = self.service.queue(loop=0)
        wave = waves.queue()
        for name in EASING_NAMES:
            wave.transition(self.orbs[name], 600, set="progress", from_=0, to=1, effect=name)
        waves.delay(None, 400)

        self.service.repeat(self._on_tick, 500)
        self.service.cycle(self.sprite, f"{SPRITE_FRAMES}fps", to=SPRITE_FRAMES - 1)

    def _on_tick(self, payload: dict) -> None:
        self.ticks = payload["count"]
        self.skipped += payload["skipped_count"]

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        units = list(self.service.registry) if self.paused else self._held
        for unit in units:
            if self.paused:
                unit.pause()
            else:
                unit.start()
        self._held = units

    def restart(self) -> None:
        self.loop.stop()
        self.skipped = 0


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Timer Gallery - cadence demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()
    running = True

    while running:
        real_ms = clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.toggle_pause()
                elif event.key == pygame.K_r:
                    state.restart()

        # --- Tick ---
        if state.loop.step(real_ms) is None:
            state.restart()

        # --- Render ---
        screen.fill(BG_COLOR)
        for i, name in enumerate(EASING_NAMES):
            draw_orb_lane(screen, font, i, name, state.orbs[name].progress)
        draw_ticker_lane(screen, font, 4, "repeat 500ms", state.ticks, state.skipped)
        draw_frame_lane(screen, font, 5, "cycle 8fps", state.sprite.sprite_x, SPRITE_FRAMES)
        draw_status_bar(
            screen, font, state.loop.clock.fps, len(state.service.registry), state.paused
        )

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
