"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
LANE_H = 90
LABEL_W = 150
TRACK_W = 480
STATUS_H = 36
LANE_COUNT = 6

SCREEN_W = LABEL_W + TRACK_W
SCREEN_H = LANE_H * LANE_COUNT + STATUS_H

TRACK_PAD = 20
ORB_RADIUS = 10

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
TRACK_RAIL = (60, 60, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
FLASH_COLOR = (255, 220, 80)

# Easing name -> color
EASING_COLORS: dict[str, tuple[int, int, int]] = {
    "linear": (0, 220, 220),
    "ease_in": (255, 160, 40),
    "ease_out": (60, 220, 80),
    "ease_out_bounce": (220, 80, 220),
}

EASING_NAMES = list(EASING_COLORS)
