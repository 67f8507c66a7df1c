# src/tests/obs_unit.py
import numpy as np

from src.env.observations import build_observation, obstacles_ahead, OBS_SIZE, MAX_OB_W, MAX_OB_H
from src.game.config import WORLD_WIDTH
from src.game.level import Obstacle
from src.game.simulation import Simulation, Intent


def _sim() -> Simulation:
    sim = Simulation(seed=17)
    sim.handle_intent(Intent.JUMP)
    return sim


def _check_ranges(obs: np.ndarray):
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,), "Shape/dtype mismatch"
    assert -1.0 <= obs[1] <= 1.0, "vy_norm out of range"
    rest = np.delete(obs, 1)
    assert np.all((rest >= 0.0) & (rest <= 1.0)), f"feature out of [0,1]: {obs}"
    assert obs[2] in (0.0, 1.0), "grounded flag not 0/1"


def test_obs_without_obstacles_uses_sentinels():
    obs = build_observation(_sim())
    _check_ranges(obs)
    assert obs[0] == 1.0 and obs[1] == 0.0 and obs[2] == 1.0
    assert list(obs[4:10]) == [1.0, 0.0, 0.0, 1.0, 0.0, 0.0]
    assert obs[10] == 0.0


def test_obs_describes_nearest_obstacles_in_order():
    sim = _sim()
    sim.obstacles.extend([
        Obstacle(x=-100.0, variant=0),    # already behind the runner
        Obstacle(x=250.0, variant=3),
        Obstacle(x=450.0, variant=1),
        Obstacle(x=700.0, variant=2),
    ])
    ahead = obstacles_ahead(sim.runner.x, sim.obstacles)
    assert [o.x for o in ahead] == [250.0, 450.0]

    obs = build_observation(sim)
    _check_ranges(obs)
    assert np.isclose(obs[4], (250.0 - sim.runner.x) / WORLD_WIDTH)
    assert np.isclose(obs[5], 48 / MAX_OB_W) and np.isclose(obs[6], 56 / MAX_OB_H)
    assert np.isclose(obs[7], (450.0 - sim.runner.x) / WORLD_WIDTH)
    assert np.isclose(obs[8], 24 / MAX_OB_W) and np.isclose(obs[9], 48 / MAX_OB_H)


def test_obs_stays_in_range_over_a_run():
    sim = _sim()
    sim.collided = lambda: False
    for t in range(3000):
        if t % 40 == 0:
            sim.handle_intent(Intent.JUMP)
        sim.update(1.0 if t % 7 else 3.0)
        _check_ranges(build_observation(sim))


def main():
    for name, fn in list(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
            print(f"✓ {name}")
    print("✓ obs unit sanity passed")


if __name__ == "__main__":
    main()
