"""Procedural sprite atlas and frame drawing."""
from __future__ import annotations

import math

import pygame

from ui.constants import ATLAS_COLS, ATLAS_ROWS, CELL, ROW_COLORS, SCALE


def build_atlas() -> pygame.Surface:
    """Draw a 5x5 grid of frames. Each row is one clip; columns animate a bob."""
    atlas = pygame.Surface((CELL * ATLAS_COLS, CELL * ATLAS_ROWS), pygame.SRCALPHA)
    for row in range(ATLAS_ROWS):
        color = ROW_COLORS[row]
        for col in range(ATLAS_COLS):
            phase = col / ATLAS_COLS * 2 * math.pi
            x = col * CELL
            y = row * CELL
            lift = int(6 * math.sin(phase)) if row != 2 else int(20 * math.sin(phase / 2))
            body = pygame.Rect(x + 20, y + 18 - lift, 24, 30)
            pygame.draw.rect(atlas, color, body, border_radius=6)
            pygame.draw.circle(atlas, color, (x + 32, y + 12 - lift), 8)
            if row == 3:
                reach = 4 + col * 4
                pygame.draw.line(atlas, (240, 240, 240),
                                 (body.right, body.centery), (body.right + reach, body.centery - 4), 3)
    return atlas


def frame_rect(index: int) -> pygame.Rect:
    """Region of the atlas holding frame ``index`` (row-major)."""
    row, col = divmod(index, ATLAS_COLS)
    return pygame.Rect(col * CELL, row * CELL, CELL, CELL)


def draw_frame(surface: pygame.Surface, atlas: pygame.Surface, index: int, pos: tuple[int, int]) -> None:
    cell = atlas.subsurface(frame_rect(index))
    scaled = pygame.transform.scale(cell, (CELL * SCALE, CELL * SCALE))
    surface.blit(scaled, pos)
