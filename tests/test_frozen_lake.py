import random

import pytest

from rltoolkit.envs.frozen_lake import FLAction, FrozenLake, Square


def test_reset_returns_start():
    env = FrozenLake()
    env.step(FLAction.RIGHT)
    assert env.reset() == 0
    assert env.is_active()


def test_start_has_no_left_or_up():
    env = FrozenLake()
    actions = env.actions()
    assert FLAction.LEFT not in actions
    assert FLAction.UP not in actions
    assert set(actions) <= set(FLAction)


def test_left_from_start_raises():
    env = FrozenLake()
    with pytest.raises(ValueError):
        env.step(FLAction.LEFT)


def test_falling_into_hole_terminates():
    env = FrozenLake()
    env.reset()
    env.step(FLAction.DOWN)
    next_state, reward = env.step(FLAction.RIGHT)
    assert next_state is None
    assert reward == -1.0
    assert env.map[env.pos] is Square.HOLE
    assert not env.is_active()


def test_reaching_goal():
    env = FrozenLake()
    path = [FLAction.RIGHT, FLAction.RIGHT, FLAction.DOWN, FLAction.DOWN, FLAction.DOWN]
    for action in path:
        next_state, reward = env.step(action)
        assert next_state == env.pos
        assert reward == -0.1
    next_state, reward = env.step(FLAction.RIGHT)
    assert next_state is None
    assert reward == 1.0
    assert env.map[env.pos] is Square.GOAL
    assert env.report["steps"] == len(path) + 1
    assert env.report["reward"] == pytest.approx(len(path) * -0.1 + 1.0)


def test_random_walk_invariants():
    random.seed(7)
    env = FrozenLake()
    for _ in range(20):
        env.reset()
        total, steps = 0.0, 0
        while env.is_active():
            action = env.random_action()
            assert action in env.actions()
            _, reward = env.step(action)
            assert reward in (-0.1, -1.0, 1.0)
            total += reward
            steps += 1
        env.report["steps"] -= steps
        env.report["reward"] -= total
        assert env.report["steps"] == 0
        assert env.report["reward"] == pytest.approx(0.0)