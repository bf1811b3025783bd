"""Bar segments: breathing anchors, the pushed block, and the target zone.

Every segment exposes ``center``, ``half_length`` and ``blend`` (the inner
solid ratio used by gradient rendering).
"""
from __future__ import annotations

import math
import random
from typing import Iterable, Protocol

from wavebar.wave import Wave

# Target centers never come closer than this to either bar end.
MIN_TARGET_MARGIN = 80.0


class Segment(Protocol):
    center: float
    half_length: float
    blend: float


def overlaps(a: Segment, b: Segment) -> bool:
    """Center distance within the combined half-lengths."""
    return abs(a.center - b.center) <= a.half_length + b.half_length


class AnchorSegment:
    """Reference marker that breathes in place and is displaced by waves.

    Endpoints are displaced independently, which captures stretching; a
    separate sample at the rest midpoint captures bumps narrower than the
    segment. ``beta`` weights the midpoint sample against the endpoint
    skeleton.
    """

    def __init__(
        self,
        rest_center: float,
        base_half_length: float,
        blend: float,
        breathe_amp: float,
        breathe_omega: float,
        beta: float,
    ) -> None:
        self.rest_center = rest_center
        self.base_half_length = base_half_length
        self.blend = blend
        self.breathe_amp = breathe_amp
        self.breathe_omega = breathe_omega
        self.beta = beta
        self.center = rest_center
        self.half_length = base_half_length

    def update(self, waves: Iterable[Wave], t: float) -> None:
        waves = list(waves)
        half = self.base_half_length * (
            1 + self.breathe_amp * math.sin(self.breathe_omega * t)
        )
        left_rest = self.rest_center - half
        right_rest = self.rest_center + half

        left = left_rest + sum(w.displacement_at(left_rest, t) for w in waves)
        right = right_rest + sum(w.displacement_at(right_rest, t) for w in waves)
        skeleton_center = 0.5 * (left + right)

        mid_rest = 0.5 * (left_rest + right_rest)
        local_center = mid_rest + sum(w.displacement_at(mid_rest, t) for w in waves)

        self.center = (1 - self.beta) * skeleton_center + self.beta * local_center
        self.half_length = max(1.0, 0.5 * abs(right - left))


class BlockSegment:
    """Marker that glides toward its goal at constant speed after a push.

    Motion is integrated per update (``center += velocity * dt``) so the
    trajectory depends on the step size; the endpoint does not.
    """

    def __init__(
        self,
        center: float,
        half_length: float,
        blend: float,
        speed_scale: float,
        bar_length: float,
    ) -> None:
        self.center = center
        self.half_length = half_length
        self.blend = blend
        self.speed_scale = speed_scale
        self.bar_length = bar_length
        self.target_center = center
        self.velocity = 0.0

    @property
    def moving(self) -> bool:
        return self.velocity != 0.0

    def place(self, x: float) -> None:
        """Teleport to ``x`` and stop."""
        self.center = x
        self.target_center = x
        self.velocity = 0.0

    def push(self, distance: float, wave_speed: float) -> None:
        """Set a new goal ``distance`` away, replacing any motion in flight."""
        self.target_center = max(0.0, min(self.bar_length, self.center + distance))
        self.velocity = abs(wave_speed) * self.speed_scale

    def update(self, dt: float) -> None:
        remaining = self.target_center - self.center
        if abs(remaining) < 1:
            self.center = self.target_center
            self.velocity = 0.0
            return
        direction = 1.0 if remaining > 0 else -1.0
        self.center += direction * self.velocity * dt
        if (self.target_center - self.center) * direction <= 0:
            self.center = self.target_center
            self.velocity = 0.0


class TargetSegment:
    """Static zone that jumps to a random spot on demand."""

    def __init__(
        self,
        center: float,
        half_length: float,
        blend: float,
        bar_length: float,
    ) -> None:
        self.center = center
        self.half_length = half_length
        self.blend = blend
        self.bar_length = bar_length

    def margin(self, min_gap: float) -> float:
        return max(self.half_length + min_gap, MIN_TARGET_MARGIN)

    def respawn(
        self,
        rng: random.Random,
        min_gap: float = 40.0,
        avoid_center: float | None = None,
        avoid_length: float = 0.0,
        attempts: int = 30,
    ) -> bool:
        """Move to a uniform draw within the margins, avoiding a zone.

        Redraws up to ``attempts`` times while the draw lies within
        ``avoid_center +/- (half_length + avoid_length + min_gap)``. The last
        draw is kept either way. Returns True when the kept draw is clear.
        """
        margin = self.margin(min_gap)
        candidate = rng.uniform(margin, self.bar_length - margin)
        if avoid_center is None:
            self.center = candidate
            return True

        reach = self.half_length + avoid_length + min_gap
        tries = 0
        while abs(candidate - avoid_center) <= reach and tries < attempts:
            candidate = rng.uniform(margin, self.bar_length - margin)
            tries += 1
        self.center = candidate
        return abs(candidate - avoid_center) > reach
