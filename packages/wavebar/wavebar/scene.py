"""Per-tick render snapshot handed to display collaborators."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from wavebar.flash import ColorAdvisory
from wavebar.segments import Segment


@dataclass(frozen=True)
class SegmentView:
    center: float
    half_length: float
    blend: float

    @classmethod
    def of(cls, segment: Segment) -> SegmentView:
        return cls(segment.center, segment.half_length, segment.blend)


@dataclass(frozen=True)
class Scene:
    anchors: tuple[SegmentView, ...]
    block: SegmentView
    target: SegmentView
    time: float
    phase: str
    hit_count: int
    tint: ColorAdvisory

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
