"""Layered one-pixel-per-unit bar display.

Each layer is a row of RGBA colors, one per bar unit. The topmost opaque
layer wins per column when the bar is drawn.
"""
from __future__ import annotations

import pygame

from wavebar import Scene, SegmentView

from ui.constants import BASE_LAYER, LAYER_COUNT, PALETTES

RGBA = tuple[int, int, int, int]
TRANSPARENT: RGBA = (0, 0, 0, 0)


def lerp_color(a: RGBA, b: RGBA, w: float) -> RGBA:
    return tuple(int(round(ai + (bi - ai) * w)) for ai, bi in zip(a, b))


class BarDisplay:
    def __init__(self, bar_length: int, bar_height: int, palette: int) -> None:
        self.bar_length = bar_length
        self.bar_height = bar_height
        self.palette_index = max(0, min(len(PALETTES) - 1, palette))
        self.layers: list[list[RGBA]] = [
            [TRANSPARENT] * bar_length for _ in range(LAYER_COUNT)
        ]

    @property
    def palette(self) -> dict[str, RGBA]:
        return PALETTES[self.palette_index]

    def cycle_palette(self) -> None:
        self.palette_index = (self.palette_index + 1) % len(PALETTES)

    def clear(self, layer: int | None = None) -> None:
        targets = range(LAYER_COUNT) if layer is None else [layer - 1]
        for idx in targets:
            self.layers[idx] = [TRANSPARENT] * self.bar_length

    def _span(self, seg: SegmentView) -> range:
        start = max(0, int(seg.center - seg.half_length))
        end = min(self.bar_length - 1, int(seg.center + seg.half_length) + 1)
        return range(start, end + 1)

    def apply_solid(self, seg: SegmentView, color: RGBA, layer: int = BASE_LAYER) -> None:
        row = self.layers[layer - 1]
        for i in self._span(seg):
            row[i] = color

    def apply_gradient(self, seg: SegmentView, color: RGBA, layer: int = BASE_LAYER) -> None:
        """Solid inside ``blend * half_length``, fading linearly to the edges."""
        row = self.layers[layer - 1]
        inner = seg.half_length * seg.blend
        span = (seg.half_length - inner) or 1.0
        for i in self._span(seg):
            dx = abs(i - seg.center)
            if dx > seg.half_length:
                continue
            weight = 1.0 if dx <= inner else 1.0 - (dx - inner) / span
            row[i] = lerp_color(row[i], color, max(0.0, min(1.0, weight)))

    def render_scene(self, scene: Scene) -> None:
        """Redraw the bottom layer from a controller scene."""
        pal = self.palette
        self.clear(BASE_LAYER)
        full = SegmentView(self.bar_length * 0.5, self.bar_length * 0.5, 0.0)
        self.apply_solid(full, pal["bar"])
        for anchor in scene.anchors:
            self.apply_gradient(anchor, pal["anchor"])
        target_color = pal["target_hit"] if scene.tint.lit else pal["target"]
        self.apply_solid(scene.target, target_color)
        self.apply_solid(scene.block, pal["block"])

    def draw(self, surface: pygame.Surface, x: int, y: int, bg: tuple[int, int, int]) -> None:
        strip = pygame.Surface((self.bar_length, 1))
        for i in range(self.bar_length):
            color: tuple[int, ...] = bg
            for row in self.layers:
                if row[i][3] > 0:
                    color = row[i][:3]
                    break
            strip.set_at((i, 0), color)
        surface.blit(pygame.transform.scale(strip, (self.bar_length, self.bar_height)), (x, y))
