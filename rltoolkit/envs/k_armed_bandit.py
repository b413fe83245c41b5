"""The K-armed bandit environment."""

from __future__ import annotations

import random
from typing import Optional


def _generate_arms(k: int) -> list[float]:
    return [random.gauss(0.0, 1.0) for _ in range(k)]


class KArmedBandit:
    """A single-state environment with ``k`` arms paying normally distributed rewards.

    Each arm's mean is drawn from a standard normal; rewards have unit variance.
    When not stationary, every mean drifts by N(0, 0.01) after each step.
    """

    def __init__(self, k: int, step_limit: int, stationary: bool) -> None:
        if k <= 0:
            raise ValueError("k must be positive")
        self.k = k
        self.step_limit = step_limit
        self.is_stationary = stationary
        self.means = _generate_arms(k)
        self.steps = 0
        self.rewards: list[float] = []
        self.report: dict[str, float] = {"reward": 0.0}

    def step(self, action: int) -> tuple[Optional[tuple], float]:
        """Pull arm ``action``; the state is ``()`` until the step limit is reached."""
        if not 0 <= action < self.k:
            raise ValueError(f"Invalid action: {action}")
        reward = random.gauss(self.means[action], 1.0)
        self.report["reward"] += reward
        self.steps += 1
        self.rewards.append(reward)

        if not self.is_stationary:
            self.means = [mean + random.gauss(0.0, 0.01) for mean in self.means]

        next_state = () if self.steps < self.step_limit else None
        return next_state, reward

    def reset(self) -> tuple:
        """Draw new arms and clear the step count and reward history."""
        self.steps = 0
        self.means = _generate_arms(self.k)
        self.rewards.clear()
        return ()

    def random_action(self) -> int:
        """A uniformly chosen arm."""
        return random.randrange(self.k)

    def actions(self) -> list[int]:
        """All arm indices."""
        return list(range(self.k))

    def take_rewards(self) -> list[float]:
        """Return the rewards collected so far and start a fresh history."""
        rewards, self.rewards = self.rewards, []
        return rewards