import random

from rltoolkit.envs.windy_gridworld import WindyAction, WindyGridworld


def test_reset_returns_start():
    env = WindyGridworld()
    env.step(WindyAction.RIGHT)
    assert env.reset() == (3, 0)
    assert env.pos == (3, 0)


def test_actions_are_all_distinct_moves():
    env = WindyGridworld()
    actions = env.actions()
    assert len(actions) == 9
    assert len({a.delta for a in actions}) == 9
    assert all(abs(dx) <= 1 and abs(dy) <= 1 for dx, dy in (a.delta for a in actions))


def test_wind_pushes_agent():
    env = WindyGridworld()
    next_state, reward = env.step(WindyAction.STAY)
    assert next_state == (3, 1)
    assert reward == -1.0


def test_staying_reaches_goal_by_wind():
    env = WindyGridworld()
    result = None
    steps = 0
    while result is None or result[0] is not None:
        result = env.step(WindyAction.STAY)
        steps += 1
        assert steps <= 20
    assert result == (None, 0.0)
    assert env.pos == env.goal
    assert env.report["steps"] == steps


def test_random_walk_stays_in_bounds():
    random.seed(9)
    env = WindyGridworld()
    for _ in range(500):
        action = env.random_action()
        assert action in env.actions()
        next_state, reward = env.step(action)
        x, y = env.pos
        assert 0 <= x <= 9 and 0 <= y <= 7
        if next_state is None:
            assert reward == 0.0
            env.reset()
        else:
            assert next_state == env.pos
            assert reward == -1.0
    assert env.report["steps"] == 500