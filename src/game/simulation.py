# src/game/simulation.py
"""
The runner simulation: all mutable game state behind one object.

Usage:
    sim = Simulation(seed=123, store=MemoryHighScoreStore())
    sim.handle_intent(Intent.JUMP)        # Idle -> Playing
    while running:
        sim.update(clamp_dt(frames_elapsed))
        draw_scene(screen, build_scene(sim))

Time is measured in frames at the 60 Hz reference rate (dt = 1.0 is one
frame). Callers clamp dt with clamp_dt() before calling update().
"""
from __future__ import annotations
import logging
import math
import random
from collections import deque
from enum import Enum
from typing import Deque, List, Optional

from .config import (
    WORLD_WIDTH, DT_MAX, SPEED_START, SPEED_INCREMENT, SCORE_DIVISOR,
    OBSTACLE_SPEED_MARGIN, OBSTACLE_PRUNE_X,
    SPAWN_INTERVAL, SPAWN_INTERVAL_MIN, SPAWN_DECAY, SPAWN_EDGE_MARGIN,
    CLOUD_CHANCE, CLOUD_PRUNE_X
)
from .geometry import intersects
from .level import (
    Cloud, GroundStrip, Obstacle, ObstacleSpawner, spawn_cloud, spawn_initial_clouds
)
from .persistence import HighScoreStore, MemoryHighScoreStore
from .player import Runner

log = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameover"


class Intent(Enum):
    JUMP = "jump"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


def clamp_dt(dt: float) -> float:
    """Bound a frame delta to [0, DT_MAX]; NaN/inf count as no time."""
    if not math.isfinite(dt):
        return 0.0
    return min(DT_MAX, max(0.0, dt))


def spawn_interval_for(speed: float, base: float = SPAWN_INTERVAL) -> float:
    """Frames between spawns: shrinks as speed grows, floored at SPAWN_INTERVAL_MIN."""
    return max(SPAWN_INTERVAL_MIN, base - speed * SPAWN_DECAY)


class Simulation:
    """
    Owns the runner, the ground strip, and every live obstacle and cloud.

    Phases:
        IDLE --jump/restart--> PLAYING --pause--> PAUSED --pause--> PLAYING
        PLAYING --collision--> GAME_OVER --jump/restart--> PLAYING
    Intents that don't apply to the current phase are ignored.
    """

    def __init__(self, seed: Optional[int] = None, store: Optional[HighScoreStore] = None):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.spawner = ObstacleSpawner(self.rng)
        self.store: HighScoreStore = store if store is not None else MemoryHighScoreStore()

        self.phase = Phase.IDLE
        self.speed = SPEED_START
        self.distance = 0.0
        self.score = 0
        self.high_score = self.store.read_high_score()
        self._unsaved = False                    # high score raised since the last save
        self.spawn_timer = 0.0
        self.spawn_interval = SPAWN_INTERVAL

        self.runner = Runner()
        self.ground = GroundStrip()
        self.obstacles: Deque[Obstacle] = deque()
        self.clouds: List[Cloud] = spawn_initial_clouds(self.rng)

    # -------------------- Intents --------------------

    def handle_intent(self, intent: Intent):
        if intent is Intent.JUMP:
            if self.phase in (Phase.IDLE, Phase.GAME_OVER):
                self.reset()
            elif self.phase is Phase.PLAYING:
                self.runner.jump()
        elif intent is Intent.TOGGLE_PAUSE:
            if self.phase is Phase.PLAYING:
                self._set_phase(Phase.PAUSED)
                self.save_high_score()
            elif self.phase is Phase.PAUSED:
                self._set_phase(Phase.PLAYING)
        elif intent is Intent.RESTART:
            if self.phase in (Phase.IDLE, Phase.GAME_OVER):
                self.reset()

    def jump(self):
        self.handle_intent(Intent.JUMP)

    def toggle_pause(self):
        self.handle_intent(Intent.TOGGLE_PAUSE)

    def restart(self):
        self.handle_intent(Intent.RESTART)

    def reset(self):
        """Start a fresh run. The high score survives."""
        self._set_phase(Phase.PLAYING)
        self.speed = SPEED_START
        self.distance = 0.0
        self.score = 0
        self.runner.reset()
        self.ground.reset()
        self.obstacles.clear()
        self.spawn_timer = 0.0
        self.spawn_interval = SPAWN_INTERVAL
        self.clouds = spawn_initial_clouds(self.rng)

    def save_high_score(self):
        """Hand the high score to the store if it rose since the last save.
        Called when a run ends or pauses and when the game quits, never mid-tick."""
        if self._unsaved:
            self._unsaved = False
            self.store.write_high_score(self.high_score)

    def _set_phase(self, phase: Phase):
        if phase is not self.phase:
            log.debug("phase %s -> %s (score=%d)", self.phase.value, phase.value, self.score)
        self.phase = phase

    # -------------------- Tick --------------------

    @property
    def required_spawn_interval(self) -> float:
        return spawn_interval_for(self.speed, self.spawn_interval)

    def update(self, dt: float) -> bool:
        """Advance one tick. Returns True if the run ended during this tick."""
        if self.phase is Phase.PAUSED:
            return False

        if self.phase is not Phase.PLAYING:
            # Idle / game over: ambient motion only
            self.ground.update(dt, self.speed)
            self._update_clouds(dt)
            return False

        self.speed += SPEED_INCREMENT * dt
        self.distance += self.speed * dt
        self.score = math.floor(self.distance / SCORE_DIVISOR)
        if self.score > self.high_score:
            self.high_score = self.score
            self._unsaved = True

        self.ground.update(dt, self.speed)

        if self.rng.random() < CLOUD_CHANCE * dt:
            self.clouds.append(spawn_cloud(self.rng, WORLD_WIDTH + SPAWN_EDGE_MARGIN))
        self._update_clouds(dt)

        self.runner.update(dt, self.speed)

        self.spawn_timer += dt
        if self.spawn_timer >= self.required_spawn_interval:
            self.spawn_timer = 0.0
            self.obstacles.append(self.spawner.spawn_obstacle(self.obstacles, self.speed))

        for ob in self.obstacles:
            ob.speed = self.speed + OBSTACLE_SPEED_MARGIN
            ob.update(dt)

        # obstacles never overtake each other, so only the head can be off-screen first
        while self.obstacles and self.obstacles[0].x + self.obstacles[0].width < OBSTACLE_PRUNE_X:
            self.obstacles.popleft()

        if self.collided():
            self._set_phase(Phase.GAME_OVER)
            self.save_high_score()
            log.debug("run over: score=%d high=%d seed=%s", self.score, self.high_score, self.seed)
            return True
        return False

    def collided(self) -> bool:
        rb = self.runner.bounds
        return any(intersects(rb, ob.bounds) for ob in self.obstacles)

    def _update_clouds(self, dt: float):
        for c in self.clouds:
            c.update(dt, self.speed)
        self.clouds = [c for c in self.clouds if c.x + c.width >= CLOUD_PRUNE_X]
