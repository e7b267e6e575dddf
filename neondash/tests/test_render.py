# neondash/tests/test_render.py
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from neondash.game.config import WIDTH, HEIGHT, COLOR_PROGRESS
from neondash.game.level import LevelTrack, Obstacle, ObstacleType
from neondash.game.render import _draw_obstacle, draw_frame
from neondash.game.session import GameSession


def test_draw_frame_covers_every_obstacle_kind_and_hud():
    pygame.init()
    try:
        surf = pygame.Surface((WIDTH, HEIGHT))
        font = pygame.font.Font(None, 18)
        track = LevelTrack([Obstacle(x=200.0 + 120 * i, kind=k) for i, k in enumerate(ObstacleType)],
                           length=1000.0)
        session = GameSession(track)

        draw_frame(surf, session.snapshot(), 0.0, font)   # idle overlay
        session.start()
        session.state.distance = 500.0
        session.progress = 0.5
        draw_frame(surf, session.snapshot(), session.state.distance, font)

        # progress bar filled up to the middle of the screen
        assert tuple(surf.get_at((WIDTH // 4, 2)))[:3] == COLOR_PROGRESS
    finally:
        pygame.quit()


def test_unknown_obstacle_kind_is_not_drawn():
    pygame.init()
    try:
        surf = pygame.Surface((WIDTH, HEIGHT))
        with pytest.raises(AssertionError):
            _draw_obstacle(surf, 150.0, "SPIKE")
    finally:
        pygame.quit()
