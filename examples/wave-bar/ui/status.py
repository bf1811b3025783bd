"""Status bar rendering."""
from __future__ import annotations

import pygame

from wavebar import Scene

from ui.constants import PHASE_COLORS, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


def draw_status(
    surface: pygame.Surface,
    font: pygame.font.Font,
    scene: Scene,
    win_hits: int,
    preset: str,
    fps: float,
) -> None:
    rect = pygame.Rect(0, 0, SCREEN_W, STATUS_H)
    pygame.draw.rect(surface, STATUS_BG, rect)

    phase_color = PHASE_COLORS.get(scene.phase, TEXT_COLOR)
    line = (
        f"t={scene.time:6.2f}  hits {scene.hit_count}/{win_hits}  "
        f"preset: {preset}  FPS: {fps:.0f}"
    )
    surface.blit(font.render(scene.phase, True, phase_color), (10, 6))
    surface.blit(font.render(line, True, TEXT_COLOR), (90, 6))
    help_line = "A/S/D launch right  L/K/J launch left  P palette  R reset  Esc quit"
    surface.blit(font.render(help_line, True, TEXT_DIM), (10, 24))
