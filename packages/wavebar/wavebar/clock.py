"""Simulation clock advanced by the frame delta."""
from __future__ import annotations

import math


class SimClock:
    def __init__(self) -> None:
        self._time = 0.0
        self._tick_number = 0

    @property
    def time(self) -> float:
        return self._time

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self, dt: float) -> float:
        if not math.isfinite(dt) or dt < 0:
            raise ValueError(f"dt must be finite and non-negative, got {dt!r}")
        self._time += dt
        self._tick_number += 1
        return self._time

    def reset(self) -> None:
        self._time = 0.0
        self._tick_number = 0
