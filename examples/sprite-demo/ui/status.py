"""Bottom status bar."""
from __future__ import annotations

import pygame

from tick_animgraph import Animator

from ui.constants import SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM, WARN_COLOR


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, animator: Animator) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    pending = animator.pending or "-"
    movement = animator.graph.variables.get_float("movement") or 0.0
    line = f"node: {animator.active}  frame: {animator.current_frame()}  pending: {pending}  movement: {movement:.0f}"
    surface.blit(font.render(line, True, TEXT_COLOR), (8, y + 6))

    if animator.last_error is not None:
        surface.blit(font.render(str(animator.last_error), True, WARN_COLOR), (8, y + 26))
    else:
        hint = "Right: walk  Space: jump  A: attack  Esc: quit"
        surface.blit(font.render(hint, True, TEXT_DIM), (8, y + 26))
