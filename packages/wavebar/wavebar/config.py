"""Game configuration and bar geometry.

All spatial constants are defined for a 3000-unit bar and scale linearly
with the configured bar length.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

BASE_BAR_LENGTH = 3000
BASE_BAR_HEIGHT = 50
BASE_ANCHOR_HALF_LENGTH = 200.0
BASE_BLOCK_HALF_LENGTH = 30.0
BASE_TARGET_HALF_LENGTH = 90.0
BASE_TARGET_MIN_GAP = 80.0
BASE_TARGET_OFFSET = 200.0
MIN_TARGET_GAP = 10.0

ANCHOR_BLEND = 0.05
ANCHOR_BREATHE_AMP = 0.5
ANCHOR_BREATHE_OMEGA = 1.5
ANCHOR_BETA = 0.6
BLOCK_BLEND = 0.5
BLOCK_SPEED_SCALE = 0.35
TARGET_BLEND = 0.5

DEFAULT_CONFIG_FILENAME = "wavebar_config.json"


@dataclass(frozen=True)
class Geometry:
    """Spatial constants for one bar length."""

    bar_length: int
    bar_height: int
    scale: float
    anchor_half_length: float
    block_half_length: float
    target_half_length: float
    target_min_gap: float
    target_offset: float


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration fixed at controller construction.

    Attributes:
        bar_length: Bar length in units; rounded and floored at 1.
        bar_height: Bar height in units; rounded and floored at 1.
        win_hits: Hits required to win.
        overlap_threshold: Seconds of continuous overlap that count as a hit.
        win_duration: Seconds spent in WIN before the game resets.
        flash_interval: Seconds between target color toggles while touching.
        segment_count: Number of anchor segments.
        seed: RNG seed for target placement; None draws one from the OS.
    """

    bar_length: int = BASE_BAR_LENGTH
    bar_height: int = BASE_BAR_HEIGHT
    win_hits: int = 3
    overlap_threshold: float = 2.0
    win_duration: float = 3.0
    flash_interval: float = 0.15
    segment_count: int = 4
    seed: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "bar_length", max(1, round(self.bar_length)))
        object.__setattr__(self, "bar_height", max(1, round(self.bar_height)))
        if self.win_hits < 1:
            raise ValueError(f"win_hits must be >= 1, got {self.win_hits}")
        if self.overlap_threshold <= 0:
            raise ValueError(
                f"overlap_threshold must be > 0, got {self.overlap_threshold}"
            )
        if self.win_duration <= 0:
            raise ValueError(f"win_duration must be > 0, got {self.win_duration}")
        if self.flash_interval <= 0:
            raise ValueError(
                f"flash_interval must be > 0, got {self.flash_interval}"
            )
        if self.segment_count < 0:
            raise ValueError(
                f"segment_count must be >= 0, got {self.segment_count}"
            )

    def geometry(self) -> Geometry:
        s = self.bar_length / BASE_BAR_LENGTH
        return Geometry(
            bar_length=self.bar_length,
            bar_height=self.bar_height,
            scale=s,
            anchor_half_length=BASE_ANCHOR_HALF_LENGTH * s,
            block_half_length=BASE_BLOCK_HALF_LENGTH * s,
            target_half_length=BASE_TARGET_HALF_LENGTH * s,
            target_min_gap=max(MIN_TARGET_GAP, BASE_TARGET_MIN_GAP * s),
            target_offset=BASE_TARGET_OFFSET * s,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> GameConfig:
        known = {f.name for f in fields(GameConfig)}
        return GameConfig(**{k: v for k, v in d.items() if k in known})


def load_config(path: str | Path | None = None) -> GameConfig:
    """Read a JSON config. A missing file yields the defaults."""
    path = Path(path) if path else Path.cwd() / DEFAULT_CONFIG_FILENAME
    if not path.exists():
        return GameConfig()
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return GameConfig.from_dict(data)


def save_config(cfg: GameConfig, path: str | Path | None = None) -> Path:
    path = Path(path) if path else Path.cwd() / DEFAULT_CONFIG_FILENAME
    with path.open("w", encoding="utf-8") as f:
        json.dump(cfg.to_dict(), f, indent=2)
    return path
