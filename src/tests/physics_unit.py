# src/tests/physics_unit.py
"""
Unit checks for boxes, runner physics and the scrolling entities.

Usage (from repo root):
  python -m pytest src/tests/physics_unit.py
  python -m src.tests.physics_unit
"""
from src.game.config import (
    GROUND_Y, RUNNER_X, RUNNER_H, JUMP_STRENGTH, GRAVITY, GROUND_SEGMENT_W, CLOUD_PARALLAX,
    SPEED_START
)
from src.game.geometry import Box, intersects
from src.game.level import Cloud, GroundStrip, Obstacle
from src.game.player import Runner


def test_boxes_overlap():
    assert intersects(Box(0, 0, 10, 10), Box(5, 5, 10, 10))
    assert intersects(Box(0, 0, 10, 10), Box(2, 2, 3, 3))      # containment
    assert not intersects(Box(0, 0, 10, 10), Box(20, 0, 5, 5))


def test_touching_edges_do_not_intersect():
    a = Box(0, 0, 10, 10)
    assert not intersects(a, Box(10, 0, 10, 10))   # shares right edge
    assert not intersects(a, Box(0, 10, 10, 10))   # shares bottom edge
    assert not intersects(a, Box(10, 10, 5, 5))    # shares a corner
    assert intersects(a, Box(9.999, 0, 10, 10))


def test_runner_starts_grounded():
    r = Runner()
    assert r.x == RUNNER_X
    assert r.grounded
    assert r.y + r.height == GROUND_Y
    b = r.bounds
    assert (b.x, b.y, b.w, b.h) == (r.x + 6, r.y + 6, r.width - 12, r.height - 10)


def test_jump_only_from_ground():
    r = Runner()
    assert r.jump() is True
    assert r.vy == -JUMP_STRENGTH
    assert not r.grounded

    # second press mid-air changes nothing
    assert r.jump() is False
    assert r.vy == -JUMP_STRENGTH

    r.update(1.0, SPEED_START)
    vy_after = r.vy
    r.jump()
    assert r.vy == vy_after


def test_semi_implicit_euler_step():
    r = Runner()
    r.jump()
    y0 = r.y
    r.update(1.0, SPEED_START)
    assert r.vy == -JUMP_STRENGTH + GRAVITY
    assert r.y == y0 + r.vy          # position uses the updated velocity


def test_ground_clamp_through_a_full_jump():
    r = Runner()
    r.jump()
    landed_at = None
    for t in range(200):
        r.update(1.0, SPEED_START)
        assert r.y + r.height <= GROUND_Y
        assert (r.y + r.height == GROUND_Y) == r.grounded
        if r.grounded:
            landed_at = t
            break
    assert landed_at is not None and landed_at > 10
    assert r.vy == 0.0


def test_large_dt_still_lands_on_ground():
    r = Runner()
    r.jump()
    for _ in range(20):
        r.update(3.0, SPEED_START)
    assert r.grounded
    assert r.y == GROUND_Y - RUNNER_H


def test_legs_cycle_only_on_ground():
    r = Runner()
    r.update(1.0, world_speed=6.0)
    assert r.leg_tick == 0.25 * 6.0
    r.jump()
    tick = r.leg_tick
    r.update(1.0, world_speed=6.0)
    assert r.leg_tick == tick
    assert r.leg_phase in (0, 1)


def test_runner_update_needs_world_speed():
    # leaving the speed out would freeze the legs, so it is not optional
    r = Runner()
    try:
        r.update(1.0)
    except TypeError:
        pass
    else:
        raise AssertionError("Runner.update accepted a missing world_speed")
    assert r.leg_tick == 0.0


def test_runner_reset_in_place():
    r = Runner()
    r.jump()
    r.update(1.0, SPEED_START)
    r.leg_tick = 7.3
    r.reset()
    assert r == Runner()


def test_obstacle_moves_with_pushed_speed():
    ob = Obstacle(x=500.0, variant=1, speed=6.5)
    ob.update(2.0)
    assert ob.x == 500.0 - 13.0
    assert (ob.width, ob.height) == (24, 48)
    assert ob.y + ob.height == GROUND_Y
    b = ob.bounds
    assert (b.x, b.y, b.w, b.h) == (ob.x + 4, ob.y + 4, 16, 40)


def test_cloud_parallax_scales_with_world_speed():
    c = Cloud(x=300.0, y=50.0)
    c.update(1.0, world_speed=10.0)
    assert c.x == 300.0 - CLOUD_PARALLAX * 10.0


def test_ground_offset_wraps():
    g = GroundStrip()
    for _ in range(500):
        g.update(3.0, world_speed=13.7)
        assert 0.0 <= g.offset < GROUND_SEGMENT_W
    g.reset()
    assert g.offset == 0.0


def main():
    for name, fn in list(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
            print(f"✓ {name}")


if __name__ == "__main__":
    main()
