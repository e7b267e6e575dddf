# neondash/game/player.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from .config import (
    PLAYER_X, PLAYER_SIZE, GROUND_Y, GRAVITY, JUMP_FORCE,
    SHIP_LIFT, SHIP_GRAVITY_SCALE, SHIP_MAX_VY, CUBE_SPIN_DEG_PER_S
)


class Mode(Enum):
    CUBE = "CUBE"
    SHIP = "SHIP"


@dataclass
class Player:
    """
    Plain physical state of the runner.
    - y is TOP-based (screen coordinates, grows downward)
    - rotation is in degrees and purely cosmetic (never used by collisions)
    """
    x: float
    y: float
    vy: float
    rotation: float
    mode: Mode

    @property
    def bottom(self) -> float:
        return self.y + PLAYER_SIZE


def spawn_player() -> Player:
    """Initial pose: cube resting on the ground, no velocity, no tilt."""
    return Player(x=PLAYER_X, y=GROUND_Y - PLAYER_SIZE, vy=0.0, rotation=0.0, mode=Mode.CUBE)


def reset_player(player: Player) -> None:
    player.y = GROUND_Y - PLAYER_SIZE
    player.vy = 0.0
    player.rotation = 0.0
    player.mode = Mode.CUBE


def _advance_cube(player: Player, dt: float, pressed: bool) -> None:
    player.vy += GRAVITY
    if player.bottom >= GROUND_Y:
        # on the ground: snap, stop, and jump if the button is held
        player.y = GROUND_Y - PLAYER_SIZE
        player.vy = JUMP_FORCE if pressed else 0.0
        player.rotation = 0.0
    else:
        player.rotation += CUBE_SPIN_DEG_PER_S * dt


def _advance_ship(player: Player, pressed: bool) -> None:
    player.vy += SHIP_LIFT if pressed else GRAVITY * SHIP_GRAVITY_SCALE
    if player.vy > SHIP_MAX_VY: player.vy = SHIP_MAX_VY
    if player.vy < -SHIP_MAX_VY: player.vy = -SHIP_MAX_VY
    player.rotation = player.vy * 2.0


def advance_player(player: Player, dt: float, pressed: bool) -> bool:
    """
    Integrate one tick of vertical motion for the current mode.
    Velocity changes are per tick; only the cube's spin uses dt.
    Returns True when the move is fatal (a ship touching the ground).
    """
    if player.mode is Mode.CUBE:
        _advance_cube(player, dt, pressed)
    elif player.mode is Mode.SHIP:
        _advance_ship(player, pressed)
    else:
        raise AssertionError(f"unknown player mode: {player.mode!r}")

    player.y += player.vy

    # Ceiling of the play area
    if player.y < 0.0:
        player.y = 0.0
        player.vy = 0.0

    if player.bottom > GROUND_Y:
        if player.mode is Mode.SHIP:
            return True
        # cube landed this tick
        player.y = GROUND_Y - PLAYER_SIZE
        player.vy = 0.0
        player.rotation = 0.0
    return False
