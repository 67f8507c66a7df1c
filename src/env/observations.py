# src/env/observations.py
from __future__ import annotations
from typing import List, Sequence
import numpy as np

from src.game.config import (
    WORLD_WIDTH, GROUND_Y, RUNNER_H, JUMP_STRENGTH, OBSTACLE_VARIANTS
)
from src.game.level import Obstacle

OBS_SIZE = 11
LOOKAHEAD = 2                      # nearest obstacles described
SPEED_NORM_MAX = 20.0              # speed mapped to 1.0 (reached after ~1.5 h of play)
MAX_OB_W = max(w for w, _ in OBSTACLE_VARIANTS)
MAX_OB_H = max(h for _, h in OBSTACLE_VARIANTS)


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)

def _norm_y(y_top: float) -> float:
    """1.0 standing on the ground, smaller while airborne."""
    return _clamp01(y_top / float(GROUND_Y - RUNNER_H))

def _norm_vy(vy: float, vy_max: float = JUMP_STRENGTH) -> float:
    vv = max(-vy_max, min(vy, vy_max))
    return vv / vy_max

def obstacles_ahead(runner_x: float, obstacles: Sequence[Obstacle], count: int = LOOKAHEAD) -> List[Obstacle]:
    """Obstacles whose right edge is still in front of the runner's left edge, nearest first."""
    ahead = [o for o in obstacles if o.x + o.width > runner_x]
    return ahead[:count]   # obstacle order is spawn order == left to right

def build_observation(sim) -> np.ndarray:
    """
    Returns a fixed (11,) float32 vector:
      [ y_norm, vy_norm, grounded, speed_norm,
        dx@1, w@1, h@1,
        dx@2, w@2, h@2,
        spawn_progress ]
    - vy_norm in [-1,1], everything else in [0,1]
    - dx is the gap from the runner's x to the obstacle's left edge over WORLD_WIDTH;
      sentinel for a missing obstacle: dx=1.0, w=h=0.0
    """
    r = sim.runner
    feats: List[float] = [
        _norm_y(r.y),
        _norm_vy(r.vy),
        1.0 if r.grounded else 0.0,
        _clamp01(sim.speed / SPEED_NORM_MAX),
    ]

    ahead = obstacles_ahead(r.x, sim.obstacles)
    for i in range(LOOKAHEAD):
        if i < len(ahead):
            o = ahead[i]
            feats.extend([
                _clamp01((o.x - r.x) / WORLD_WIDTH),
                o.width / MAX_OB_W,
                o.height / MAX_OB_H,
            ])
        else:
            feats.extend([1.0, 0.0, 0.0])

    feats.append(_clamp01(sim.spawn_timer / sim.required_spawn_interval))
    return np.asarray(feats, dtype=np.float32)
