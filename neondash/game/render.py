# neondash/game/render.py
from __future__ import annotations
from typing import Optional
import pygame
from .config import (
    WIDTH, HEIGHT, GRID_SPACING, GROUND_Y, PLAYER_SIZE, SPIKE_FOOTPRINT_W,
    COLOR_BG, COLOR_GRID, COLOR_FLOOR, COLOR_ACCENT, COLOR_SPIKE,
    COLOR_PORTAL_SHIP, COLOR_PORTAL_CUBE, COLOR_FG, COLOR_PROGRESS, COLOR_PROGRESS_BG
)
from .level import ObstacleType
from .session import Snapshot

PORTAL_W = 15
PORTAL_TOP = 50
PROGRESS_H = 6


def _draw_spike(surf: pygame.Surface, x: float, w: float, h: float):
    pts = [(x, GROUND_Y), (x + w / 2, GROUND_Y - h), (x + w, GROUND_Y)]
    pygame.draw.polygon(surf, COLOR_SPIKE, pts)


def _draw_obstacle(surf: pygame.Surface, rel_x: float, kind: ObstacleType):
    if kind is ObstacleType.SPIKE:
        _draw_spike(surf, rel_x, SPIKE_FOOTPRINT_W, 30)
    elif kind is ObstacleType.SPIKE_TOP:
        # taller spike topped with a marker, same footprint
        _draw_spike(surf, rel_x, SPIKE_FOOTPRINT_W, 45)
        pygame.draw.circle(surf, COLOR_FG, (int(rel_x + SPIKE_FOOTPRINT_W / 2), int(GROUND_Y - 45)), 3)
    elif kind is ObstacleType.TRIPLE_SPIKE:
        w = SPIKE_FOOTPRINT_W / 3
        for i in range(3):
            _draw_spike(surf, rel_x + i * w, w, 22)
    elif kind is ObstacleType.PORTAL_TO_SHIP or kind is ObstacleType.PORTAL_TO_CUBE:
        color = COLOR_PORTAL_SHIP if kind is ObstacleType.PORTAL_TO_SHIP else COLOR_PORTAL_CUBE
        pygame.draw.rect(surf, color, pygame.Rect(int(rel_x), PORTAL_TOP, PORTAL_W, int(GROUND_Y) - PORTAL_TOP))
    else:
        raise AssertionError(f"unhandled obstacle type: {kind!r}")


def _draw_player(surf: pygame.Surface, snap: Snapshot):
    size = int(PLAYER_SIZE)
    body = pygame.Surface((size, size), pygame.SRCALPHA)
    body.fill(COLOR_ACCENT)
    pygame.draw.rect(body, COLOR_FG, body.get_rect(), width=2)
    # pygame rotates counter-clockwise; the simulation's angle grows clockwise
    rotated = pygame.transform.rotate(body, -snap.rotation)
    center = (snap.player_x + PLAYER_SIZE / 2, snap.player_y + PLAYER_SIZE / 2)
    surf.blit(rotated, rotated.get_rect(center=(int(center[0]), int(center[1]))))


def draw_frame(surf: pygame.Surface, snap: Snapshot, distance: float,
               font: Optional[pygame.font.Font] = None):
    """Draw one full frame: grid, floor, obstacles, player, HUD."""
    surf.fill(COLOR_BG)

    # Scrolling background grid
    offset = -(distance % GRID_SPACING)
    x = offset
    while x < WIDTH:
        pygame.draw.line(surf, COLOR_GRID, (int(x), 0), (int(x), HEIGHT))
        x += GRID_SPACING

    # Floor
    pygame.draw.rect(surf, COLOR_FLOOR, pygame.Rect(0, int(GROUND_Y), WIDTH, HEIGHT - int(GROUND_Y)))
    pygame.draw.line(surf, COLOR_ACCENT, (0, int(GROUND_Y)), (WIDTH, int(GROUND_Y)), 2)

    for rel_x, kind in snap.obstacles:
        _draw_obstacle(surf, rel_x, kind)

    _draw_player(surf, snap)

    # Progress bar
    pygame.draw.rect(surf, COLOR_PROGRESS_BG, pygame.Rect(0, 0, WIDTH, PROGRESS_H))
    pygame.draw.rect(surf, COLOR_PROGRESS, pygame.Rect(0, 0, int(WIDTH * snap.progress), PROGRESS_H))

    if font is None:
        return

    hud = f"Attempt {snap.attempts}   {int(snap.progress * 100)}%   {snap.mode.value}"
    surf.blit(font.render(hud, True, COLOR_FG), (12, PROGRESS_H + 6))

    if not snap.active:
        msg = "LEVEL COMPLETE - press to play again" if snap.completed else "Press SPACE / click to start"
        txt = font.render(msg, True, COLOR_FG)
        surf.blit(txt, ((WIDTH - txt.get_width()) // 2, (HEIGHT - txt.get_height()) // 2))
