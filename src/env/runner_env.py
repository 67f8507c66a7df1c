# src/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WORLD_WIDTH, WORLD_HEIGHT, FPS
from src.game.persistence import MemoryHighScoreStore
from src.game.render import draw_scene
from src.game.scene import build_scene
from src.game.simulation import Simulation, Intent, Phase
from src.env.observations import build_observation, OBS_SIZE


class RunnerEnv(gym.Env):
    """
    Endless runner Gymnasium environment (vector observations).
    - Simulation at the 60 Hz reference rate (dt = 1 frame per sub-step).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Observation: shape (11,), float32 (see observations.build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.dt = 1.0

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)

        low = np.zeros(OBS_SIZE, dtype=np.float32)
        low[1] = -1.0
        high = np.ones(OBS_SIZE, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.sim: Optional[Simulation] = None
        self.timestep: int = 0                   # number of *decision* steps elapsed
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # An explicit seed drives the simulation directly; otherwise draw one from
        # np_random so reset() sequences stay reproducible after a seeded reset.
        if seed is not None:
            sim_seed = int(seed)
        else:
            sim_seed = int(self.np_random.integers(0, 2**31 - 1))

        self.sim = Simulation(seed=sim_seed, store=MemoryHighScoreStore())
        self.sim.handle_intent(Intent.JUMP)      # Idle -> Playing
        self.timestep = 0
        self.current_seed = sim_seed

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim is not None, "Call reset() before step()"

        # JUMP in GameOver would start a new run, so only act while playing
        alive = self.sim.phase is Phase.PLAYING
        if int(action) == 1 and alive:
            self.sim.handle_intent(Intent.JUMP)

        for _ in range(self.frame_skip):
            if self.sim.update(self.dt):
                break

        # Reward: +1 if alive after this decision; -1 once dead
        terminated = self.sim.phase is Phase.GAME_OVER
        reward = -1.0 if terminated else 1.0

        self.timestep += 1
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.sim is not None
        return build_observation(self.sim)

    def _info(self) -> Dict[str, Any]:
        assert self.sim is not None
        return {
            "seed": self.current_seed,
            "distance": self.sim.distance,
            "score": self.sim.score,
            "speed": self.sim.speed,
            "timestep": self.timestep,
            "grounded": self.sim.runner.grounded,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.sim is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WORLD_WIDTH, WORLD_HEIGHT))
                pygame.display.set_caption("T-Rex Runner: Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WORLD_WIDTH, WORLD_HEIGHT))
            self.font = pygame.font.SysFont("monospace", 14, bold=True)

        draw_scene(self.screen, build_scene(self.sim), self.font)

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata["render_fps"])
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
            self.font = None
