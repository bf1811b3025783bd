"""Wave Bar - interactive demo of the wavebar simulation.

Waves launched from either end of the bar displace the anchors and push the
white block. Keep the block on the target zone for two seconds to score a
hit; three hits win.

Controls:
  A/S/D   Launch soft/medium/hard wave from the left
  L/K/J   Launch soft/medium/hard wave from the right
  P       Cycle palette
  R       Reset the game
  Esc     Quit
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from wavebar import GameConfig, load_config
from wavebar.logging_setup import setup_logging

from game.session import ImpulseReplay, Session
from ui.constants import BAR_H, BG_COLOR, DEFAULT_PALETTE, FPS, SCREEN_H, SCREEN_W, STATUS_H
from ui.display import BarDisplay
from ui.overlay import WinOverlay
from ui.status import draw_status


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("--config", type=Path, default=None, help="JSON game config")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--win-hits", type=int, default=None)
    p.add_argument("--palette", type=int, default=DEFAULT_PALETTE)
    p.add_argument("--impulses", type=Path, default=None, help="Replay a JSON-lines impulse file")
    p.add_argument("--replay-interval", type=float, default=1.0)
    p.add_argument("--log-level", default="INFO")
    p.add_argument("--log-file", default=None)
    return p.parse_args()


def build_config(args: argparse.Namespace) -> GameConfig:
    data = load_config(args.config).to_dict() if args.config else {}
    # The bar spans the window: one unit per pixel.
    data["bar_length"] = SCREEN_W
    data["bar_height"] = BAR_H
    if args.seed is not None:
        data["seed"] = args.seed
    if args.win_hits is not None:
        data["win_hits"] = args.win_hits
    return GameConfig.from_dict(data)


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level, args.log_file)
    config = build_config(args)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Wave Bar")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    replay = ImpulseReplay(args.impulses, args.replay_interval) if args.impulses else None
    session = Session(config, replay)
    display = BarDisplay(config.bar_length, config.bar_height, args.palette)
    overlay = WinOverlay(session.bus, display)

    bar_y = STATUS_H + (SCREEN_H - STATUS_H - BAR_H) // 2
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    display.cycle_palette()
                elif event.key == pygame.K_r:
                    session.controller.reset()
                elif event.unicode:
                    session.key(event.unicode)

        # --- Tick ---
        session.update(dt)

        # --- Render ---
        screen.fill(BG_COLOR)
        scene = session.controller.scene()
        display.render_scene(scene)
        overlay.render()
        display.draw(screen, 0, bar_y, BG_COLOR)
        draw_status(
            screen,
            font,
            scene,
            win_hits=config.win_hits,
            preset=session.controller.preset.name,
            fps=clock.get_fps(),
        )

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
