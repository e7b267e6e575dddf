# neondash/game/session.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
from .config import SPEED
from .collision import check_collisions
from .level import LevelTrack, ObstacleType, default_track
from .player import Mode, Player, advance_player, reset_player, spawn_player

log = logging.getLogger(__name__)


class Status(Enum):
    IDLE = "idle"            # waiting for the first press
    RUNNING = "running"
    COMPLETE = "complete"    # reached the end of the track


@dataclass
class SessionState:
    distance: float = 0.0
    attempts: int = 1
    active: bool = False
    pressed: bool = False
    completed: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, for renderers and HUDs."""
    player_x: float
    player_y: float
    rotation: float
    mode: Mode
    obstacles: Tuple[Tuple[float, ObstacleType], ...]   # (relative x, kind) of visible obstacles
    progress: float
    attempts: int
    active: bool
    completed: bool


class GameSession:
    """
    Owns the player and the run bookkeeping; everything goes through tick().
    Death is an instant respawn: the session stays active and the next tick resumes.
    """

    def __init__(self, track: Optional[LevelTrack] = None, speed: float = SPEED):
        self.track = track if track is not None else default_track()
        self.speed = float(speed)
        self.player: Player = spawn_player()
        self.state = SessionState()
        self.progress: float = 0.0
        self.death_cause: Optional[str] = None   # "spike" | "ground" of the last death

        # observers
        self.on_start: List[Callable[[], None]] = []
        self.on_death: List[Callable[[int], None]] = []

    # -------------------- Lifecycle --------------------

    @property
    def status(self) -> Status:
        if self.state.active:
            return Status.RUNNING
        return Status.COMPLETE if self.state.completed else Status.IDLE

    @property
    def active(self) -> bool:
        return self.state.active

    def start(self) -> None:
        if self.state.active:
            raise RuntimeError("session already running")
        self.state.active = True
        self.state.completed = False
        self.state.distance = 0.0
        self.progress = 0.0
        reset_player(self.player)
        log.debug("run started (attempt %d)", self.state.attempts)
        for cb in self.on_start:
            cb()

    def press(self, down: bool) -> None:
        if down and not self.state.active:
            self.start()
        self.state.pressed = bool(down)

    def die(self, cause: Optional[str] = None) -> None:
        self.death_cause = cause
        self.state.attempts += 1
        self.state.distance = 0.0
        self.progress = 0.0
        reset_player(self.player)
        log.debug("died (%s), attempt %d", cause or "-", self.state.attempts)
        for cb in self.on_death:
            cb(self.state.attempts)

    def tick(self, dt: float) -> None:
        if not self.state.active:
            return

        pressed = self.state.pressed   # one read per tick
        self.state.distance += self.speed * dt

        if advance_player(self.player, dt, pressed):
            self.die("ground")
        else:
            hit = check_collisions(self.player, self.track, self.state.distance)
            if hit.died:
                self.die("spike")
            elif hit.mode is not None and hit.mode is not self.player.mode:
                log.debug("mode %s -> %s at %.1f", self.player.mode.value, hit.mode.value, self.state.distance)
                self.player.mode = hit.mode

        self.progress = min(self.state.distance / self.track.length, 1.0)
        if self.state.distance >= self.track.length:
            self._complete()

    def _complete(self) -> None:
        self.state.active = False
        self.state.completed = True
        self.progress = 1.0
        log.debug("level complete after %d attempt(s)", self.state.attempts)

    # -------------------- Read-only view --------------------

    def snapshot(self) -> Snapshot:
        p = self.player
        return Snapshot(
            player_x=p.x,
            player_y=p.y,
            rotation=p.rotation,
            mode=p.mode,
            obstacles=tuple((rx, ob.kind) for rx, ob in self.track.visible(self.state.distance)),
            progress=self.progress,
            attempts=self.state.attempts,
            active=self.state.active,
            completed=self.state.completed,
        )
