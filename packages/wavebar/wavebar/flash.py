"""Target color-flash advisory.

The core never touches colors. It reports whether the target is flashing and
which phase of the flash is showing; the renderer picks the actual colors.
"""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ColorAdvisory:
    """What the renderer should do with the target color this frame.

    Attributes:
        flashing: A flash is in progress.
        lit: Show the highlight color instead of the base color.
    """

    flashing: bool = False
    lit: bool = False


IDLE_ADVISORY = ColorAdvisory()


@dataclass
class FlashState:
    """Alternating flash started at ``start``.

    ``flashes`` counts on/off pairs; None flashes until cancelled.
    """

    mode: str
    start: float
    interval: float
    flashes: int | None = None

    @property
    def continuous(self) -> bool:
        return self.flashes is None

    def toggles(self, t: float) -> int:
        return math.floor((t - self.start) / self.interval)

    def lit(self, t: float) -> bool:
        return self.toggles(t) % 2 == 1

    def expired(self, t: float) -> bool:
        if self.flashes is None:
            return False
        return self.toggles(t) >= self.flashes * 2

    def advisory(self, t: float) -> ColorAdvisory:
        return ColorAdvisory(flashing=True, lit=self.lit(t))
