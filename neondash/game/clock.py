# neondash/game/clock.py
from __future__ import annotations
import time
from typing import Callable, Optional
from .config import DT_MAX, DT_FALLBACK, FPS
from .session import GameSession


class ManualTimeSource:
    """Deterministic stand-in for time.perf_counter; advance() moves time forward."""

    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class SimulationClock:
    """
    Turns frame timestamps (seconds) into clamped dt values and drives
    exactly one session.tick(dt) per frame.
    """

    def __init__(self,
                 session: GameSession,
                 time_source: Callable[[], float] = time.perf_counter,
                 sleep: Optional[Callable[[float], None]] = time.sleep,
                 fps: int = FPS):
        self.session = session
        self.time_source = time_source
        self.sleep = sleep
        self.frame_s = 1.0 / max(1, fps)
        self.last_time = time_source()
        # a fresh run must not see the idle time before it as one huge frame
        session.on_start.append(self.sync)

    def sync(self) -> None:
        self.last_time = self.time_source()

    def close(self) -> None:
        """Detach from the session; a replaced clock must not keep resyncing."""
        if self.sync in self.session.on_start:
            self.session.on_start.remove(self.sync)

    def on_frame(self, current_time: float) -> float:
        dt = current_time - self.last_time
        if dt > DT_MAX:
            dt = DT_FALLBACK
        elif dt < 0.0:
            # time source went backwards; treat as an empty frame
            dt = 0.0
        self.last_time = current_time

        self.session.tick(dt)
        return dt

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Headless frame loop: one on_frame per frame, until the session stops
        being active (level complete) or max_frames is reached.
        Returns the number of frames driven.
        """
        frames = 0
        while self.session.active:
            if max_frames is not None and frames >= max_frames:
                break
            if self.sleep is not None:
                self.sleep(self.frame_s)
            self.on_frame(self.time_source())
            frames += 1
        return frames
