# src/game/level.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Sequence
from .config import (
    WORLD_WIDTH, GROUND_Y, GROUND_SEGMENT_W,
    OBSTACLE_VARIANTS, OBSTACLE_INSET, OBSTACLE_SPEED_MARGIN,
    GAP_MIN, GAP_MAX, SPAWN_EDGE_MARGIN, SPAWN_DEFAULT_LAST_X,
    CLOUD_W, CLOUD_H, CLOUD_PARALLAX, CLOUD_INITIAL, CLOUD_Y_MIN, CLOUD_Y_SPAN
)
from .geometry import Box


@dataclass
class Obstacle:
    """A ground obstacle. Only x moves; speed is pushed in by the simulation every tick."""
    x: float
    variant: int = 0
    speed: float = 0.0

    @property
    def width(self) -> int:
        return OBSTACLE_VARIANTS[self.variant % len(OBSTACLE_VARIANTS)][0]

    @property
    def height(self) -> int:
        return OBSTACLE_VARIANTS[self.variant % len(OBSTACLE_VARIANTS)][1]

    @property
    def y(self) -> float:
        return float(GROUND_Y - self.height)

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def bounds(self) -> Box:
        i = OBSTACLE_INSET
        return self.box.inset(i, i, 2 * i, 2 * i)

    def update(self, dt: float):
        self.x -= self.speed * dt


@dataclass
class Cloud:
    """Background decoration; scrolls at a fraction of the world speed."""
    x: float
    y: float
    speed: float = CLOUD_PARALLAX
    width: int = CLOUD_W
    height: int = CLOUD_H

    def update(self, dt: float, world_speed: float):
        self.x -= self.speed * dt * world_speed


@dataclass
class GroundStrip:
    """Phase of the repeating ground pattern, kept in [0, segment_width)."""
    offset: float = 0.0
    segment_width: int = GROUND_SEGMENT_W

    def update(self, dt: float, world_speed: float):
        self.offset = (self.offset + world_speed * dt) % self.segment_width

    def reset(self):
        self.offset = 0.0


def spawn_cloud(rng: random.Random, x: float) -> Cloud:
    return Cloud(x=x, y=CLOUD_Y_MIN + rng.random() * CLOUD_Y_SPAN)


def spawn_initial_clouds(rng: random.Random) -> List[Cloud]:
    """Spread a few clouds across the sky so the first frame isn't empty."""
    return [
        spawn_cloud(rng, 100 + i * 180 + rng.random() * 120)
        for i in range(CLOUD_INITIAL)
    ]


class ObstacleSpawner:
    """
    Places obstacles to the right of the screen:
    - variant uniform over OBSTACLE_VARIANTS
    - gap to the previous obstacle uniform in [GAP_MIN, GAP_MAX)
    - never before the obstacle has fully cleared the right edge
    """
    def __init__(self, rng: random.Random):
        self.rng = rng

    def next_x(self, obstacles: Sequence[Obstacle]) -> float:
        last_x = obstacles[-1].x if obstacles else SPAWN_DEFAULT_LAST_X
        gap = GAP_MIN + self.rng.random() * (GAP_MAX - GAP_MIN)
        return max(WORLD_WIDTH + SPAWN_EDGE_MARGIN, last_x + gap)

    def spawn_obstacle(self, obstacles: Sequence[Obstacle], world_speed: float) -> Obstacle:
        variant = self.rng.randrange(len(OBSTACLE_VARIANTS))
        obstacle = Obstacle(x=self.next_x(obstacles), variant=variant)
        obstacle.speed = world_speed + OBSTACLE_SPEED_MARGIN
        return obstacle
