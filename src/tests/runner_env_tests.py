# src/tests/runner_env_tests.py
"""
Quick tests for RunnerEnv (Gymnasium environment).

Usage (from repo root):
  python -m pytest src/tests/runner_env_tests.py
  python -m src.tests.runner_env_tests
  python -m src.tests.runner_env_tests --render
"""

from __future__ import annotations
import argparse
import os
import sys
from typing import List, Tuple

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
from gymnasium.utils.env_checker import check_env

from src.env.runner_env import RunnerEnv
from src.game.config import WORLD_WIDTH, WORLD_HEIGHT
from src.game.simulation import Phase


def test_api_check(frame_skip: int = 4) -> None:
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = RunnerEnv(frame_skip=frame_skip)
    try:
        check_env(env)
    finally:
        env.close()


def test_smoke(steps: int = 300, seed: int = 123, frame_skip: int = 4) -> None:
    """Short random rollout: no crashes, obs in space, reward type, proper terminations."""
    env = RunnerEnv(frame_skip=frame_skip)
    env.action_space.seed(seed)
    try:
        obs, info = env.reset(seed=seed)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["seed"] == seed and info["score"] == 0

        for t in range(steps):
            a = env.action_space.sample()
            obs, r, term, trunc, info = env.step(a)
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                assert r == (-1.0 if term else 1.0)
                break
            assert r == 1.0
    finally:
        env.close()


def test_noop_policy_eventually_crashes(seed: int = 5) -> None:
    env = RunnerEnv(frame_skip=4)
    try:
        env.reset(seed=seed)
        term = False
        for _ in range(500):
            _, r, term, trunc, info = env.step(0)
            if term:
                break
        assert term and r == -1.0
        assert info["score"] > 0
    finally:
        env.close()


def test_jump_after_crash_does_not_restart_the_run(seed: int = 5) -> None:
    """A finished episode stays finished: JUMP must not reset the game."""
    env = RunnerEnv(frame_skip=4)
    try:
        env.reset(seed=seed)
        term = False
        for _ in range(500):
            _, r, term, _, info = env.step(0)
            if term:
                break
        assert term and r == -1.0
        dist_at_crash = info["distance"]

        for _ in range(3):
            _, r, term, _, info = env.step(1)
            assert term and r == -1.0
            assert info["distance"] == dist_at_crash
            assert env.sim.phase is Phase.GAME_OVER
    finally:
        env.close()


def test_truncation_at_time_limit() -> None:
    env = RunnerEnv(frame_skip=4, time_limit_seconds=0.5)   # 7 decisions
    try:
        env.reset(seed=1)
        trunc = False
        steps = 0
        while not trunc:
            _, _, term, trunc, _ = env.step(0)
            steps += 1
            assert not term
        assert steps == env.time_limit_decisions
    finally:
        env.close()


def test_determinism(steps: int = 300, seed: int = 7, frame_skip: int = 4) -> None:
    """Same seed + same action sequence => identical obs/reward/terminal flags."""
    def rollout(seed_val: int, action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = RunnerEnv(frame_skip=frame_skip)
        traj: List[Tuple[np.ndarray, float, bool, bool]] = []
        try:
            obs, _ = env.reset(seed=seed_val)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    # Fixed action sequence using a local RNG (not numpy global)
    rng = np.random.RandomState(42)
    action_seq = [int(rng.random_sample() < 0.15) for _ in range(steps)]

    t1 = rollout(seed, action_seq)
    t2 = rollout(seed, action_seq)

    assert len(t1) == len(t2), "Determinism: trajectory length mismatch"
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        if not np.array_equal(o1, o2):
            raise AssertionError(f"Determinism: obs mismatch at step {i}")
        if not (r1 == r2 and te1 == te2 and tr1 == tr2):
            raise AssertionError(f"Determinism: transition mismatch at step {i}")


def test_rgb_array_render() -> None:
    env = RunnerEnv(render_mode="rgb_array")
    try:
        env.reset(seed=3)
        env.step(1)
        frame = env.render()
        assert frame.shape == (WORLD_HEIGHT, WORLD_WIDTH, 3)
        assert frame.dtype == np.uint8
    finally:
        env.close()


def render_demo(steps: int, seed: int, frame_skip: int) -> None:
    """Open a window and run a short NOOP demo so you can visually verify behavior."""
    os.environ.pop("SDL_VIDEODRIVER", None)
    env = RunnerEnv(render_mode="human", frame_skip=frame_skip)
    try:
        env.reset(seed=seed)
        for _ in range(steps):
            _, _, term, trunc, _ = env.step(0)
            if term or trunc:
                break
    finally:
        env.close()
    print("✓ Render demo finished")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=123, help="Episode seed for tests")
    ap.add_argument("--steps", type=int, default=300, help="Max decision steps per test")
    ap.add_argument("--frame-skip", type=int, default=4, help="Sim frames per decision step")
    ap.add_argument("--render", action="store_true", help="Run a short visual demo")
    args = ap.parse_args()

    try:
        test_api_check(frame_skip=args.frame_skip)
        print("✓ API check ok")
        test_smoke(steps=args.steps, seed=args.seed, frame_skip=args.frame_skip)
        print("✓ Smoke test ok")
        test_determinism(steps=args.steps, seed=args.seed, frame_skip=args.frame_skip)
        print("✓ Determinism ok")
        if args.render:
            render_demo(steps=min(args.steps, 600), seed=args.seed, frame_skip=args.frame_skip)
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    else:
        print("🎉 All selected tests passed")


if __name__ == "__main__":
    main()
