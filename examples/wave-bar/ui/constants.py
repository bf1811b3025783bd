"""Layout constants and color palettes."""

# Timing
FPS = 60

# Window
SCREEN_W = 1200
SCREEN_H = 240
BAR_H = 40
STATUS_H = 44

# Display layers (1 = top, 5 = bottom)
LAYER_COUNT = 5
OVERLAY_LAYER = 1
BASE_LAYER = 5

# Colors
BG_COLOR = (0, 0, 0)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
STATUS_BG = (20, 20, 28)

PHASE_COLORS: dict[str, tuple[int, int, int]] = {
    "PLAY": (120, 200, 120),
    "TOUCH": (255, 200, 60),
    "HIT": (0, 229, 255),
    "WIN": (255, 90, 200),
}

# RGBA palettes for the bar
PALETTES: list[dict[str, tuple[int, int, int, int]]] = [
    {
        "bar": (144, 255, 0, 255),
        "anchor": (255, 50, 0, 255),
        "block": (255, 255, 255, 255),
        "target": (43, 0, 255, 255),
        "target_hit": (0, 229, 255, 255),
    },
    {
        "bar": (0, 255, 255, 255),
        "anchor": (0, 180, 154, 255),
        "block": (255, 255, 255, 255),
        "target": (240, 40, 180, 255),
        "target_hit": (0, 229, 255, 255),
    },
    {
        "bar": (255, 0, 157, 255),
        "anchor": (200, 0, 255, 120),
        "block": (255, 255, 255, 255),
        "target": (238, 255, 0, 255),
        "target_hit": (0, 229, 255, 255),
    },
    {
        "bar": (60, 180, 80, 255),
        "anchor": (200, 60, 255, 255),
        "block": (0, 220, 200, 255),
        "target": (255, 140, 40, 255),
        "target_hit": (0, 229, 255, 255),
    },
]

DEFAULT_PALETTE = 2
