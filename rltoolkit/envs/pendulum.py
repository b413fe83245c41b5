"""The classic pendulum swing-up environment with a continuous action."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import Optional

MAX_SPEED = 8.0
MAX_TORQUE = 2.0
DT = 0.05
G = 10.0
M = 1.0
L = 1.0

PendulumState = tuple[float, float, float]


def angle_normalize(x: float) -> float:
    """Shift an angle towards ``[-pi, pi)`` using a truncating remainder."""
    return math.fmod(x + math.pi, 2.0 * math.pi) - math.pi


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class Pendulum:
    """Keep a pendulum upright by applying torque.

    The state is ``(cos θ, sin θ, θ̇)`` and the reward is
    ``-(θ² + 0.1·θ̇² + 0.001·u²)``.
    """

    def __init__(self, max_steps: int) -> None:
        self.theta = 0.0
        self.theta_dot = 0.0
        self.steps = 0
        self.max_steps = max_steps
        self.report: dict[str, float] = {"reward": 0.0}

    def state(self) -> PendulumState:
        """The current observation."""
        return math.cos(self.theta), math.sin(self.theta), self.theta_dot

    def step(self, action: Sequence[float]) -> tuple[Optional[PendulumState], float]:
        """Apply a torque (clamped to the allowed range) for one time step."""
        torque = _clamp(action[0], -MAX_TORQUE, MAX_TORQUE)

        theta_acc = (3.0 * G / (2.0 * L)) * math.sin(self.theta) + (3.0 / (M * L * L)) * torque
        self.theta_dot = _clamp(self.theta_dot + theta_acc * DT, -MAX_SPEED, MAX_SPEED)
        self.theta = angle_normalize(self.theta + self.theta_dot * DT)

        reward = -(self.theta ** 2 + 0.1 * self.theta_dot ** 2 + 0.001 * torque ** 2)

        self.steps += 1
        self.report["reward"] += reward

        next_state = None if self.steps >= self.max_steps else self.state()
        return next_state, reward

    def reset(self) -> PendulumState:
        """Start from a random angle and a small random velocity."""
        self.theta = random.uniform(-math.pi, math.pi)
        self.theta_dot = random.uniform(-1.0, 1.0)
        self.steps = 0
        return self.state()

    def random_action(self) -> tuple[float]:
        """A uniformly drawn torque."""
        return (random.uniform(-MAX_TORQUE, MAX_TORQUE),)

    def is_active(self) -> bool:
        """Whether the episode has steps left."""
        return self.steps < self.max_steps

    def action_dim(self) -> int:
        """The number of action components."""
        return 1

    def action_bounds(self) -> tuple[list[float], list[float]]:
        """Lower and upper bounds of each action component."""
        return [-MAX_TORQUE], [MAX_TORQUE]