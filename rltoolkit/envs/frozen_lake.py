"""The FrozenLake grid environment."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Optional

from rltoolkit.util import summary_from_keys


class Square(IntEnum):
    """The kinds of square in the FrozenLake grid."""

    FROZEN = 0
    HOLE = 1
    START = 2
    GOAL = 3


class FLAction(IntEnum):
    """A step in one of the four directions."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 3


_MAP = (
    Square.START, Square.FROZEN, Square.FROZEN, Square.FROZEN,
    Square.FROZEN, Square.HOLE, Square.FROZEN, Square.HOLE,
    Square.FROZEN, Square.FROZEN, Square.FROZEN, Square.HOLE,
    Square.HOLE, Square.FROZEN, Square.FROZEN, Square.GOAL,
)

_MOVES = {
    FLAction.LEFT: -1,
    FLAction.DOWN: 4,
    FLAction.RIGHT: 1,
    FLAction.UP: -4,
}


class FrozenLake:
    """A 4x4 frozen lake: walk from the start to the goal without falling into a hole."""

    def __init__(self) -> None:
        self.map: tuple[Square, ...] = _MAP
        self.pos = 0
        self.report: dict[str, float] = summary_from_keys(["reward", "steps"])

    def is_active(self) -> bool:
        """Whether the agent stands on a square from which play continues."""
        return self.map[self.pos] in (Square.FROZEN, Square.START)

    def actions(self) -> list[FLAction]:
        """The actions that keep the agent on the grid from its current square."""
        actions = []
        if self.pos % 4 != 0:
            actions.append(FLAction.LEFT)
        if self.pos < 12:
            actions.append(FLAction.DOWN)
        if self.pos % 4 != 3:
            actions.append(FLAction.RIGHT)
        if self.pos > 3:
            actions.append(FLAction.UP)
        return actions

    def random_action(self) -> FLAction:
        """A uniformly chosen available action."""
        return random.choice(self.actions())

    def step(self, action: FLAction) -> tuple[Optional[int], float]:
        """Move the agent; return the next state (``None`` if terminal) and the reward."""
        new_pos = self.pos + _MOVES[FLAction(action)]
        if not 0 <= new_pos < len(self.map):
            raise ValueError(f"action {FLAction(action).name} leaves the grid from {self.pos}")

        self.report["steps"] += 1.0
        self.pos = new_pos

        square = self.map[self.pos]
        if square is Square.HOLE:
            next_state, reward = None, -1.0
        elif square is Square.GOAL:
            next_state, reward = None, 1.0
        else:
            next_state, reward = self.pos, -0.1

        self.report["reward"] += reward
        return next_state, reward

    def reset(self) -> int:
        """Return the agent to the start square."""
        self.pos = 0
        return self.pos