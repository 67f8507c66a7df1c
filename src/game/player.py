# src/game/player.py
from __future__ import annotations
from dataclasses import dataclass
from .config import (
    RUNNER_X, RUNNER_W, RUNNER_H, GROUND_Y, GRAVITY, JUMP_STRENGTH,
    RUNNER_INSET, LEG_RATE
)
from .geometry import Box


@dataclass
class Runner:
    """
    The player character. Only y moves; the world scrolls past a fixed x.
    - y is TOP-based: the feet sit at y + height
    - grounded means the feet rest exactly on GROUND_Y
    """
    x: float = float(RUNNER_X)
    y: float = float(GROUND_Y - RUNNER_H)
    vy: float = 0.0
    grounded: bool = True
    leg_tick: float = 0.0
    width: int = RUNNER_W
    height: int = RUNNER_H
    gravity: float = GRAVITY
    jump_strength: float = JUMP_STRENGTH

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def bounds(self) -> Box:
        """Collision box, tighter than the visual box."""
        return self.box.inset(*RUNNER_INSET)

    @property
    def leg_phase(self) -> int:
        return int(self.leg_tick) % 2

    def jump(self) -> bool:
        """Jump only from the ground. Returns True if performed."""
        if self.grounded:
            self.vy = -self.jump_strength
            self.grounded = False
            return True
        return False

    def update(self, dt: float, world_speed: float):
        """Semi-implicit Euler step, then clamp the feet to the ground baseline."""
        self.vy += self.gravity * dt
        self.y += self.vy * dt

        if self.y + self.height >= GROUND_Y:
            self.y = float(GROUND_Y - self.height)
            self.vy = 0.0
            self.grounded = True

        # legs only cycle while running on the ground
        if self.grounded:
            self.leg_tick += dt * LEG_RATE * world_speed

    def reset(self):
        self.x = float(RUNNER_X)
        self.y = float(GROUND_Y - self.height)
        self.vy = 0.0
        self.grounded = True
        self.leg_tick = 0.0
