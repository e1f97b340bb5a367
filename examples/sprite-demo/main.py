"""Sprite Demo - a hero driven by a tick-animgraph state graph.

Exercises the animator, frame clock, loader, and exit-time requests.

Controls:
  Right   Hold to walk (sets the "movement" variable)
  Space   Jump (arms the "jump" trigger)
  A       Attack (deferred request, waits for the current clip to finish)
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys
import time

import pygame

from game.hero import make_hero
from ui.atlas import build_atlas, draw_frame
from ui.constants import BG_COLOR, CELL, FPS, GROUND_COLOR, SCALE, SCREEN_H, SCREEN_W
from ui.status import draw_status_bar

logger = logging.getLogger("sprite-demo")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Sprite Demo — tick-animgraph")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    atlas = build_atlas()
    animator, frame_clock = make_hero(
        on_transition=lambda old, new: logger.info("%s -> %s", old, new),
    )
    frame = frame_clock.update(time.monotonic())[-1]

    sprite_pos = ((SCREEN_W - CELL * SCALE) // 2, 40)
    ground_y = sprite_pos[1] + CELL * SCALE - 8
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    animator.set_trigger("jump")
                elif event.key == pygame.K_a:
                    animator.request_transition("attack")

        keys = pygame.key.get_pressed()
        animator.set_float("movement", 1.0 if keys[pygame.K_RIGHT] else 0.0)

        # --- Tick ---
        frames = frame_clock.update(time.monotonic())
        if frames:
            frame = frames[-1]

        # --- Render ---
        screen.fill(BG_COLOR)
        pygame.draw.line(screen, GROUND_COLOR, (0, ground_y), (SCREEN_W, ground_y), 2)
        draw_frame(screen, atlas, frame.index, sprite_pos)
        draw_status_bar(screen, font, animator)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
