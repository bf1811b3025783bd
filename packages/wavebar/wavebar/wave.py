"""Traveling impulse along the bar: a damped half-sine pulse."""
from __future__ import annotations

import math
from dataclasses import dataclass

# Amplitude at which a wave pushes the block by exactly one wavelength.
REFERENCE_AMPLITUDE = 400.0


@dataclass(frozen=True)
class WaveParams:
    """Shape of an impulse.

    Attributes:
        amplitude: Peak displacement at the emission edge (A0).
        alpha: Exponential decay per unit of distance travelled.
        omega: Angular frequency of the pulse.
        k: Wavenumber.
        speed_scale: Multiplier applied to the phase speed omega / k.
        push_scale: Multiplier applied to the distance the block is pushed.
    """

    amplitude: float
    alpha: float
    omega: float
    k: float
    speed_scale: float = 1.0
    push_scale: float = 1.0


class Wave:
    """A single directional impulse launched at ``origin_time``.

    ``direction`` is 1 for a wave emitted at the left edge travelling right
    and -1 for one emitted at the right edge travelling left.
    """

    def __init__(
        self,
        direction: int,
        bar_length: float,
        params: WaveParams,
        origin_time: float,
    ) -> None:
        if direction not in (1, -1):
            raise ValueError(f"direction must be 1 or -1, got {direction!r}")
        self.direction = direction
        self.bar_length = bar_length
        self.origin_time = origin_time
        self.params = params
        self.c = (params.omega / params.k) * params.speed_scale
        self.wavelength = (2 * math.pi) / params.k
        self.half_period = math.pi / params.omega
        self.travel_time = bar_length / self.c
        self.duration = self.travel_time + self.half_period
        self.block_pushed = False

    def __repr__(self) -> str:
        return (
            f"Wave(direction={self.direction}, origin_time={self.origin_time:.3f}, "
            f"c={self.c:.1f}, pushed={self.block_pushed})"
        )

    def active(self, t: float) -> bool:
        return self.origin_time <= t <= self.origin_time + self.duration

    def displacement_at(self, x: float, t: float) -> float:
        """Displacement of bar position ``x`` at time ``t``.

        Zero before the front arrives at ``x`` and after the half-sine has
        passed it.
        """
        if not self.active(t):
            return 0.0
        tau = t - self.origin_time
        base_x = x if self.direction == 1 else self.bar_length - x
        local_tau = tau - base_x / self.c
        if local_tau < 0 or local_tau > self.half_period:
            return 0.0
        amp = self.params.amplitude * math.exp(-self.params.alpha * base_x)
        disp = amp * math.sin(self.params.omega * local_tau)
        return disp if self.direction == 1 else -disp

    def front_position(self, t: float) -> float:
        tau = t - self.origin_time
        if self.direction == 1:
            return self.c * tau
        return self.bar_length - self.c * tau

    def reaches(self, x: float, t: float) -> bool:
        """True once the front has reached or passed ``x``."""
        front = self.front_position(t)
        if self.direction == 1:
            return front >= x
        return front <= x

    def push_distance(self) -> float:
        return (
            self.direction
            * self.wavelength
            * (self.params.amplitude / REFERENCE_AMPLITUDE)
            * self.params.push_scale
        )
