"""The windy gridworld environment with king's moves."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

Pos = tuple[int, int]


class WindyAction(Enum):
    """A move to one of the eight neighbours, or staying put; the value is the move."""

    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    UP_LEFT = (-1, -1)
    DOWN_LEFT = (-1, 1)
    DOWN_RIGHT = (1, 1)
    UP_RIGHT = (1, -1)
    STAY = (0, 0)

    @property
    def delta(self) -> Pos:
        return self.value


_START: Pos = (3, 0)
_GOAL: Pos = (3, 7)
_CURRENTS = (0, 0, 0, 1, 1, 1, 2, 2, 1, 0)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class WindyGridworld:
    """A 10x8 grid whose columns push the agent by a fixed wind each step."""

    def __init__(self) -> None:
        self.pos: Pos = _START
        self.goal: Pos = _GOAL
        self.currents = _CURRENTS
        self.report: dict[str, float] = {"steps": 0.0}

    def step(self, action: WindyAction) -> tuple[Optional[Pos], float]:
        """Apply the wind and the move; reaching the goal ends the episode."""
        self.report["steps"] += 1.0

        x, y = self.pos
        y += self.currents[x]
        dx, dy = WindyAction(action).delta
        self.pos = (_clamp(x + dx, 0, 9), _clamp(y + dy, 0, 7))

        if self.pos == self.goal:
            return None, 0.0
        return self.pos, -1.0

    def reset(self) -> Pos:
        """Return the agent to the start."""
        self.pos = _START
        return self.pos

    def random_action(self) -> WindyAction:
        """A uniformly chosen action."""
        return random.choice(self.actions())

    def actions(self) -> list[WindyAction]:
        """All nine actions."""
        return list(WindyAction)