# neondash/env/dash_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from neondash.game.config import WIDTH, HEIGHT
from neondash.game.level import LevelTrack, default_track
from neondash.game.render import draw_frame
from neondash.game.session import GameSession
from neondash.env.observations import OBS_SIZE, build_observation, observation_bounds


class DashEnv(gym.Env):
    """
    NeonDash Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal), fixed dt.
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Action is the held state of the button for the whole decision.
    - Episode ends on the first death or when the track is completed.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 track: Optional[LevelTrack] = None):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Invalid render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.track = track if track is not None else default_track()

        self.sim_fps = 60
        self.dt = 1.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # Actions: 0 = release, 1 = hold
        self.action_space = gym.spaces.Discrete(2)
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, shape=(OBS_SIZE,), dtype=np.float32)

        self.session: Optional[GameSession] = None
        self.timestep: int = 0
        self.death_cause: Optional[str] = None

        # Rendering
        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # The course is fixed; only the bookkeeping is fresh.
        self.session = GameSession(self.track)
        self.session.start()
        self.timestep = 0
        self.death_cause = None

        obs = self._get_obs()
        info = {"distance": 0.0, "attempts": self.session.state.attempts}
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.session is not None, "Call reset() before step()"

        session = self.session
        session.press(bool(action == 1))
        attempts_before = session.state.attempts
        died = False
        distance = session.state.distance

        for _ in range(self.frame_skip):
            session.tick(self.dt)
            if session.state.attempts != attempts_before:
                died = True
                break
            distance = session.state.distance
            if session.state.completed:
                break

        if died:
            # the session already respawned; distance is from the last live frame
            self.death_cause = session.death_cause

        completed = session.state.completed
        reward = -1.0 if died else 1.0

        self.timestep += 1
        terminated = died or completed
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        obs = self._get_obs()
        info = {
            "distance": distance,
            "progress": min(distance / self.track.length, 1.0),
            "timestep": self.timestep,
            "completed": completed,
            "death_cause": self.death_cause,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        return build_observation(self.session.player, self.track, self.session.state.distance)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.session is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("NeonDash - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))

        draw_frame(self.screen, self.session.snapshot(), self.session.state.distance)

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
