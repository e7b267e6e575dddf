# neondash/game/collision.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from .config import (
    PLAYER_SIZE, GROUND_Y, BROAD_PHASE_MIN, BROAD_PHASE_MAX,
    SPIKE_FOOTPRINT_W, SPIKE_HIT_BAND
)
from .level import LevelTrack, ObstacleType
from .player import Mode, Player


@dataclass(frozen=True)
class CollisionResult:
    mode: Optional[Mode] = None   # requested mode switch, if any portal was hit
    died: bool = False


def in_broad_phase(rel_x: float) -> bool:
    """Open interval (MIN, MAX): the single interaction zone ahead of the player."""
    return BROAD_PHASE_MIN < rel_x < BROAD_PHASE_MAX


def overlaps_horizontally(player_x: float, rel_x: float) -> bool:
    return player_x < rel_x + SPIKE_FOOTPRINT_W and player_x + PLAYER_SIZE > rel_x


def in_spike_band(player: Player) -> bool:
    """A high enough jump clears a spike even while overlapping it."""
    return player.bottom > GROUND_Y - SPIKE_HIT_BAND


def check_collisions(player: Player, track: LevelTrack, distance: float) -> CollisionResult:
    """
    Two-phase test of every obstacle against the (already integrated) player.
    - portals switch mode as soon as they are in the window, no overlap test
    - spikes need horizontal overlap AND the player low enough
    All obstacles are visited; for ambiguous portals the last one wins.
    """
    mode: Optional[Mode] = None
    died = False

    for rel_x, ob in track.relative(distance):
        if not in_broad_phase(rel_x):
            continue

        kind = ob.kind
        if kind is ObstacleType.PORTAL_TO_CUBE or kind is ObstacleType.PORTAL_TO_SHIP:
            mode = kind.target_mode
        elif kind in (ObstacleType.SPIKE, ObstacleType.SPIKE_TOP, ObstacleType.TRIPLE_SPIKE):
            if overlaps_horizontally(player.x, rel_x) and in_spike_band(player):
                died = True
        else:
            raise AssertionError(f"unhandled obstacle type: {kind!r}")

    return CollisionResult(mode=mode, died=died)
