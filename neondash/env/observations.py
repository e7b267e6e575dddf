# neondash/env/observations.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from neondash.game.config import GROUND_Y, PLAYER_SIZE, SPIKE_FOOTPRINT_W, JUMP_FORCE
from neondash.game.level import LevelTrack, ObstacleType
from neondash.game.player import Mode, Player

# How many upcoming obstacles the agent sees, and how far ahead (relative to the player)
N_AHEAD = 3
LOOKAHEAD = 600.0
OBS_SIZE = 3 + 4 * N_AHEAD
VY_SCALE = abs(JUMP_FORCE)   # largest speed the cube reaches

def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)

def _upcoming(player: Player, track: LevelTrack, distance: float) -> List[Tuple[float, ObstacleType]]:
    """Obstacles not yet fully passed, nearest first (track order is not trusted)."""
    ahead = [(rx - player.x, ob.kind) for rx, ob in track.relative(distance)
             if rx + SPIKE_FOOTPRINT_W > player.x]
    ahead.sort(key=lambda t: t[0])
    return ahead[:N_AHEAD]

def build_observation(player: Player, track: LevelTrack, distance: float) -> np.ndarray:
    """
    Returns a fixed (15,) float32 vector:
      [ y_norm, vy_norm, mode,
        dist@1, spike@1, toShip@1, toCube@1,
        dist@2, spike@2, toShip@2, toCube@2,
        dist@3, spike@3, toShip@3, toCube@3 ]
    - y_norm  in [0,1] (0 = top of play area, 1 = resting on the ground)
    - vy_norm in [-1,1]
    - mode    0.0 cube / 1.0 ship
    - dist    in [0,1] over LOOKAHEAD; sentinel 1.0 with zero flags if no obstacle
    """
    y_norm = _clamp01(player.y / max(1.0, GROUND_Y - PLAYER_SIZE))
    vy_norm = max(-1.0, min(1.0, player.vy / VY_SCALE))
    mode = 1.0 if player.mode is Mode.SHIP else 0.0

    feats: List[float] = [y_norm, vy_norm, mode]
    upcoming = _upcoming(player, track, distance)
    for i in range(N_AHEAD):
        if i < len(upcoming):
            dx, kind = upcoming[i]
            feats.extend([
                _clamp01(dx / LOOKAHEAD),
                0.0 if kind.is_portal else 1.0,
                1.0 if kind is ObstacleType.PORTAL_TO_SHIP else 0.0,
                1.0 if kind is ObstacleType.PORTAL_TO_CUBE else 0.0,
            ])
        else:
            feats.extend([1.0, 0.0, 0.0, 0.0])

    return np.asarray(feats, dtype=np.float32)

def observation_bounds() -> Tuple[np.ndarray, np.ndarray]:
    low = np.array([0.0, -1.0, 0.0] + [0.0, 0.0, 0.0, 0.0] * N_AHEAD, dtype=np.float32)
    high = np.array([1.0, 1.0, 1.0] + [1.0, 1.0, 1.0, 1.0] * N_AHEAD, dtype=np.float32)
    return low, high
