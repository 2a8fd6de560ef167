"""Lane rendering for the timer gallery."""
from __future__ import annotations

import pygame

from ui.constants import (
    EASING_COLORS,
    FLASH_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    ORB_RADIUS,
    SCREEN_W,
    SCREEN_H,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
)


def _lane_rect(index: int) -> pygame.Rect:
    return pygame.Rect(0, index * LANE_H, SCREEN_W, LANE_H)


def _track_x(progress: float) -> int:
    usable = TRACK_W - 2 * TRACK_PAD
    return int(LABEL_W + TRACK_PAD + usable * max(0.0, min(1.0, progress)))


def draw_lane(screen: pygame.Surface, font: pygame.font.Font, index: int, label: str) -> int:
    """Draw lane background, label and rail. Returns the rail's y."""
    rect = _lane_rect(index)
    pygame.draw.rect(screen, LANE_BG, rect)
    pygame.draw.rect(screen, LANE_BORDER, rect, 1)
    screen.blit(font.render(label, True, TEXT_COLOR), (8, rect.y + 8))
    y = rect.centery
    pygame.draw.line(screen, TRACK_RAIL, (_track_x(0), y), (_track_x(1), y), 2)
    return y


def draw_orb_lane(screen, font, index: int, easing: str, progress: float) -> None:
    y = draw_lane(screen, font, index, easing)
    pygame.draw.circle(screen, EASING_COLORS[easing], (_track_x(progress), y), ORB_RADIUS)


def draw_ticker_lane(screen, font, index: int, label: str, count: int, skipped: int) -> None:
    y = draw_lane(screen, font, index, label)
    text = f"count={count}  skipped={skipped}"
    screen.blit(font.render(text, True, TEXT_DIM), (LABEL_W + TRACK_PAD, y + 12))
    for i in range(count % 20):
        x = LABEL_W + TRACK_PAD + i * 22
        pygame.draw.circle(screen, FLASH_COLOR, (x, y), 6)


def draw_frame_lane(screen, font, index: int, label: str, frame: int, frames: int) -> None:
    """Sprite-frame strip; the active cell is filled."""
    y = draw_lane(screen, font, index, label)
    cell = (TRACK_W - 2 * TRACK_PAD) // frames
    for i in range(frames):
        r = pygame.Rect(LABEL_W + TRACK_PAD + i * cell, y - 15, cell - 4, 30)
        if i == frame:
            pygame.draw.rect(screen, FLASH_COLOR, r)
        else:
            pygame.draw.rect(screen, TRACK_RAIL, r, 1)


def draw_status_bar(screen, font, fps: int, units: int, paused: bool) -> None:
    rect = pygame.Rect(0, SCREEN_H - STATUS_H, SCREEN_W, STATUS_H)
    pygame.draw.rect(screen, STATUS_BG, rect)
    mode = "PAUSED" if paused else "running"
    text = f"{mode}  fps={fps}  active timers={units}   [Space] pause  [R] restart  [Esc] quit"
    screen.blit(font.render(text, True, TEXT_COLOR), (8, rect.y + 10))
