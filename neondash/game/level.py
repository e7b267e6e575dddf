# neondash/game/level.py
from __future__ import annotations
import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple
from .config import LEVEL_LENGTH, VIEW_MIN_X, VIEW_MAX_X
from .player import Mode


class LevelFormatError(ValueError):
    """Raised when level records cannot be turned into a track."""


class ObstacleType(Enum):
    SPIKE = "SPIKE"
    SPIKE_TOP = "SPIKE_TOP"
    TRIPLE_SPIKE = "TRIPLE_SPIKE"
    PORTAL_TO_CUBE = "PORTAL_TO_CUBE"
    PORTAL_TO_SHIP = "PORTAL_TO_SHIP"

    @property
    def is_portal(self) -> bool:
        return self in (ObstacleType.PORTAL_TO_CUBE, ObstacleType.PORTAL_TO_SHIP)

    @property
    def target_mode(self) -> Optional[Mode]:
        """Mode a portal switches to; None for the spike family."""
        if self is ObstacleType.PORTAL_TO_CUBE:
            return Mode.CUBE
        if self is ObstacleType.PORTAL_TO_SHIP:
            return Mode.SHIP
        return None


@dataclass(frozen=True)
class Obstacle:
    x: float            # world-space x
    kind: ObstacleType


def relative_x(obstacle: Obstacle, distance: float) -> float:
    """World x -> scroll-relative (screen) x."""
    return obstacle.x - distance


class LevelTrack:
    """
    Immutable, ordered obstacle course.
    Order is authoring order; nothing here relies on it being sorted.
    """
    def __init__(self, obstacles: Iterable[Obstacle], length: float = LEVEL_LENGTH):
        if length <= 0:
            raise LevelFormatError(f"level length must be positive, got {length}")
        self._obstacles: Tuple[Obstacle, ...] = tuple(obstacles)
        self.length = float(length)

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return self._obstacles

    def __len__(self) -> int:
        return len(self._obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def relative(self, distance: float) -> Iterator[Tuple[float, Obstacle]]:
        for ob in self._obstacles:
            yield relative_x(ob, distance), ob

    def visible(self, distance: float,
                lo: float = VIEW_MIN_X, hi: float = VIEW_MAX_X) -> List[Tuple[float, Obstacle]]:
        """Obstacles whose relative x falls inside [lo, hi] (what the renderer draws)."""
        return [(rx, ob) for rx, ob in self.relative(distance) if lo <= rx <= hi]

    @classmethod
    def from_records(cls, records: Iterable[Mapping], length: float = LEVEL_LENGTH) -> "LevelTrack":
        """Build a track from `{"x": number, "type": name}` records."""
        obstacles: List[Obstacle] = []
        for i, rec in enumerate(records):
            if not isinstance(rec, Mapping):
                raise LevelFormatError(f"records[{i}] must be an object")
            x = rec.get("x")
            if isinstance(x, bool) or not isinstance(x, (int, float)):
                raise LevelFormatError(f"records[{i}].x must be a number")
            name = rec.get("type")
            try:
                kind = ObstacleType(name)
            except ValueError:
                raise LevelFormatError(f"records[{i}].type {name!r} is not a known obstacle type") from None
            obstacles.append(Obstacle(x=float(x), kind=kind))
        return cls(obstacles, length=length)


def load_track(path: Path) -> LevelTrack:
    """
    Load a level file. Accepts either a bare list of records or
    {"length": number, "obstacles": [records]}.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise LevelFormatError(f"Failed to read level from {path}: {e}") from e

    if isinstance(data, list):
        return LevelTrack.from_records(data)
    if isinstance(data, dict) and isinstance(data.get("obstacles"), list):
        length = data.get("length", LEVEL_LENGTH)
        if isinstance(length, bool) or not isinstance(length, (int, float)):
            raise LevelFormatError("length must be a number")
        return LevelTrack.from_records(data["obstacles"], length=float(length))
    raise LevelFormatError("level file must be a list of records or an object with 'obstacles'")


# The stock course: cube spikes, a ship corridor, back to cube for the finale.
DEFAULT_LEVEL_RECORDS = (
    {"x": 800, "type": "SPIKE"}, {"x": 1100, "type": "SPIKE"}, {"x": 1400, "type": "SPIKE"},
    {"x": 1800, "type": "PORTAL_TO_SHIP"}, {"x": 2200, "type": "SPIKE_TOP"}, {"x": 2500, "type": "SPIKE_TOP"},
    {"x": 3000, "type": "PORTAL_TO_CUBE"}, {"x": 3500, "type": "TRIPLE_SPIKE"},
)


def default_track() -> LevelTrack:
    return LevelTrack.from_records(DEFAULT_LEVEL_RECORDS)
