# src/game/scene.py
"""
Read-only description of what a frame must show.

build_scene() copies everything the renderer needs out of a Simulation so
drawing code never touches (or mutates) live game state.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .simulation import Phase, Simulation


@dataclass(frozen=True)
class RunnerView:
    x: float
    y: float
    width: int
    height: int
    leg_phase: int
    grounded: bool


@dataclass(frozen=True)
class ObstacleView:
    x: float
    y: float
    width: int
    height: int
    variant: int


@dataclass(frozen=True)
class CloudView:
    x: float
    y: float
    width: int
    height: int


@dataclass(frozen=True)
class Scene:
    phase: Phase
    runner: RunnerView
    obstacles: Tuple[ObstacleView, ...]
    clouds: Tuple[CloudView, ...]
    ground_offset: float
    ground_segment: int
    score: int
    high_score: int

    @property
    def score_text(self) -> str:
        return format_score(self.score)

    @property
    def high_score_text(self) -> str:
        return "HI " + format_score(self.high_score)

    @property
    def overlay_lines(self) -> Tuple[str, ...]:
        return overlay_for(self.phase, self.score)


def format_score(value: int) -> str:
    return f"{int(value):05d}"


def overlay_for(phase: Phase, score: int) -> Tuple[str, ...]:
    if phase is Phase.IDLE:
        return ("T-Rex Runner", "Press Space / Tap to start")
    if phase is Phase.PAUSED:
        return ("Paused (press P)",)
    if phase is Phase.GAME_OVER:
        return ("Game Over", "Score " + format_score(score), "Press R to restart")
    return ()


def build_scene(sim: Simulation) -> Scene:
    r = sim.runner
    return Scene(
        phase=sim.phase,
        runner=RunnerView(r.x, r.y, r.width, r.height, r.leg_phase, r.grounded),
        obstacles=tuple(
            ObstacleView(o.x, o.y, o.width, o.height, o.variant) for o in sim.obstacles
        ),
        clouds=tuple(CloudView(c.x, c.y, c.width, c.height) for c in sim.clouds),
        ground_offset=sim.ground.offset,
        ground_segment=sim.ground.segment_width,
        score=sim.score,
        high_score=sim.high_score,
    )
