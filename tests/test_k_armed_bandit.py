import math
import random

import pytest

from rltoolkit.envs.k_armed_bandit import KArmedBandit


def test_k_armed_bandit_functional():
    env = KArmedBandit(3, 10, True)
    assert env.actions() == [0, 1, 2]

    action = env.random_action()
    assert action < 3

    reward = env.step(action)[1]
    assert math.isfinite(reward)

    for _ in range(9):
        env.step(env.random_action())

    assert env.step(env.random_action())[0] is None

    assert env.reset() == ()


def test_state_before_limit():
    env = KArmedBandit(2, 3, False)
    assert env.step(0)[0] == ()
    assert env.step(1)[0] == ()
    assert env.step(0)[0] is None


def test_invalid_action_raises():
    env = KArmedBandit(3, 10, True)
    with pytest.raises(ValueError):
        env.step(3)
    with pytest.raises(ValueError):
        env.step(-1)


def test_take_rewards_and_report():
    random.seed(2)
    env = KArmedBandit(4, 100, False)
    for _ in range(5):
        env.step(env.random_action())
    rewards = env.take_rewards()
    assert len(rewards) == 5
    assert env.report["reward"] == pytest.approx(sum(rewards))
    assert env.take_rewards() == []


def test_reset_clears_rewards():
    env = KArmedBandit(2, 10, True)
    env.step(0)
    env.reset()
    assert env.steps == 0
    assert env.take_rewards() == []