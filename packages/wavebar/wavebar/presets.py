"""Named impulse presets, ordered from softest to hardest."""
from __future__ import annotations

import math
from dataclasses import dataclass

from wavebar.wave import WaveParams


@dataclass(frozen=True)
class Preset:
    name: str
    wave: WaveParams


IMPACT_PRESETS: tuple[Preset, ...] = (
    Preset("soft", WaveParams(300.0, 0.0020, 30.0, 0.045, 3.2, 1.5)),
    Preset("medium", WaveParams(500.0, 0.0015, 40.0, 0.05, 4.8, 2.0)),
    Preset("hard", WaveParams(800.0, 0.0015, 50.0, 0.08, 6.0, 3.0)),
)

DEFAULT_LEVEL = 2


def clamp_level(level: float) -> int:
    """Clamp a 1-based preset level into the valid range.

    NaN falls back to the default level; infinities clamp to the ends.
    """
    if math.isnan(level):
        return DEFAULT_LEVEL
    if math.isinf(level):
        return 1 if level < 0 else len(IMPACT_PRESETS)
    return max(1, min(len(IMPACT_PRESETS), int(level)))


def preset_for(level: int) -> Preset:
    """Preset for a 1-based level. Out-of-range levels are clamped."""
    return IMPACT_PRESETS[clamp_level(level) - 1]


def preset_named(name: str) -> Preset:
    for preset in IMPACT_PRESETS:
        if preset.name == name:
            return preset
    raise KeyError(name)
