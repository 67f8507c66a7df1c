# src/game/render.py
from __future__ import annotations
import pygame

from .config import (
    WORLD_WIDTH, WORLD_HEIGHT, GROUND_Y,
    COLOR_SKY, COLOR_INK, COLOR_CLOUD, COLOR_GROUND, COLOR_GROUND_DASH,
    COLOR_TEXT, COLOR_TEXT_STRONG, COLOR_PANEL, COLOR_PANEL_EDGE
)
from .scene import Scene, RunnerView, ObstacleView, CloudView
from .simulation import Phase

PANEL_W, PANEL_H = 360, 100


def _box(surf: pygame.Surface, color, x: float, y: float, w: float, h: float):
    pygame.draw.rect(surf, color, pygame.Rect(int(x), int(y), int(w), int(h)))


def draw_cloud(surf: pygame.Surface, c: CloudView):
    pygame.draw.rect(surf, COLOR_CLOUD, pygame.Rect(int(c.x), int(c.y), c.width, c.height),
                     border_radius=8)
    pygame.draw.rect(surf, COLOR_CLOUD,
                     pygame.Rect(int(c.x + 12), int(c.y - 8), int(c.width * 0.6), c.height),
                     border_radius=8)


def draw_ground(surf: pygame.Surface, offset: float, segment: int):
    pygame.draw.line(surf, COLOR_GROUND, (0, GROUND_Y), (WORLD_WIDTH, GROUND_Y), 2)
    x = -offset
    while x < WORLD_WIDTH:
        pygame.draw.line(surf, COLOR_GROUND_DASH, (int(x), GROUND_Y + 8),
                         (int(x + segment * 0.5), GROUND_Y + 8), 2)
        x += segment


def draw_runner(surf: pygame.Surface, r: RunnerView):
    """Blocky dino: head, snout, eye, neck, body, tail, then legs by pose."""
    x, y = r.x, r.y
    _box(surf, COLOR_INK, x + 24, y, 20, 16)
    _box(surf, COLOR_INK, x + 44, y + 4, 6, 8)
    _box(surf, COLOR_SKY, x + 38, y + 4, 3, 3)
    _box(surf, COLOR_INK, x + 16, y + 16, 24, 20)
    _box(surf, COLOR_INK, x, y + 24, 32, 20)
    _box(surf, COLOR_INK, x - 8, y + 28, 12, 6)

    if r.grounded and r.leg_phase == 0:
        back, front = 8, 4
    elif r.grounded:
        back, front = 4, 8
    else:
        back, front = 4, 4      # tucked in the air
    _box(surf, COLOR_INK, x + 8, y + 44, 8, back)
    _box(surf, COLOR_INK, x + 24, y + 44, 8, front)


def draw_obstacle(surf: pygame.Surface, o: ObstacleView):
    # trunk + two arms
    _box(surf, COLOR_INK, o.x + o.width // 2 - 3, o.y, 6, o.height)
    _box(surf, COLOR_INK, o.x + 2, o.y + 10, 6, 14)
    _box(surf, COLOR_INK, o.x + o.width - 8, o.y + 18, 6, 12)


def draw_hud(surf: pygame.Surface, scene: Scene, font: pygame.font.Font):
    txt = font.render(f"{scene.high_score_text}  {scene.score_text}", True, COLOR_TEXT)
    surf.blit(txt, (WORLD_WIDTH - txt.get_width() - 12, 10))


def draw_overlay(surf: pygame.Surface, scene: Scene, font: pygame.font.Font):
    lines = scene.overlay_lines
    if not lines:
        return
    cx, cy = WORLD_WIDTH // 2, WORLD_HEIGHT // 2
    color = COLOR_TEXT

    if scene.phase is Phase.GAME_OVER:
        panel = pygame.Surface((PANEL_W, PANEL_H), pygame.SRCALPHA)
        panel.fill(COLOR_PANEL)
        surf.blit(panel, (cx - PANEL_W // 2, cy - PANEL_H // 2))
        pygame.draw.rect(surf, COLOR_PANEL_EDGE,
                         pygame.Rect(cx - PANEL_W // 2, cy - PANEL_H // 2, PANEL_W, PANEL_H), 2)
        color = COLOR_TEXT_STRONG

    line_h = font.get_linesize() + 6
    y0 = cy - line_h * (len(lines) - 1) / 2
    for i, msg in enumerate(lines):
        txt = font.render(msg, True, color)
        surf.blit(txt, (cx - txt.get_width() // 2, int(y0 + i * line_h) - txt.get_height() // 2))


def draw_scene(surf: pygame.Surface, scene: Scene, font: pygame.font.Font):
    """Paint a full frame, back to front."""
    surf.fill(COLOR_SKY)
    for c in scene.clouds:
        draw_cloud(surf, c)
    draw_ground(surf, scene.ground_offset, scene.ground_segment)
    draw_runner(surf, scene.runner)
    for o in scene.obstacles:
        draw_obstacle(surf, o)
    draw_hud(surf, scene, font)
    draw_overlay(surf, scene, font)
