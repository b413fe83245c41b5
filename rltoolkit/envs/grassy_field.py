"""A field for the game of snake."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from rltoolkit.util import summary_from_keys

Pos = tuple[int, int]


class Dir(IntEnum):
    """The direction the snake faces."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


def step_dir(pos: Pos, direction: Dir) -> Pos:
    """The position one step from ``pos`` in ``direction``."""
    t = int(direction)
    return pos[0] + (t & 1) * (2 - t), pos[1] + ((t + 1) & 1) * (t - 1)


@dataclass
class Snake:
    """The snake's body, head first, and its heading."""

    body: deque = field(default_factory=deque)
    direction: Dir = Dir.UP

    def head(self) -> Pos:
        """The position of the head."""
        if not self.body:
            raise IndexError("snake has no body")
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def is_intersecting(self) -> bool:
        """Whether any two body segments occupy the same square."""
        return len(set(self.body)) != len(self.body)

    def turn(self, direction: Dir) -> Dir:
        """Turn to ``direction`` unless it reverses the snake; return the new heading."""
        if abs(int(self.direction) - int(direction)) != 2:
            self.direction = Dir(direction)
        return self.direction


def spawn_snake(field_size: int) -> Snake:
    """A one-segment snake placed at random in a field of ``field_size``."""
    if field_size < 5:
        raise ValueError("field_size must be at least 5")
    head = (random.randrange(3, field_size - 1), random.randrange(3, field_size - 1))
    return Snake(deque([head]), random.choice(list(Dir)))


class GrassyField:
    """A square field of ``size`` cells surrounded by a one-cell death zone."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.snake = spawn_snake(size)
        self.food: Pos = (1, 1)
        self.report: dict[str, float] = summary_from_keys(["score", "reward", "steps"])

    def score(self) -> int:
        """The number of food items eaten."""
        return len(self.snake) - 1

    def field_size(self) -> int:
        """The side length of the field."""
        return self.size

    def _spawn_food(self) -> None:
        occupied = set(self.snake.body)
        vacant = [
            (i, j)
            for i in range(1, self.size + 1)
            for j in range(1, self.size + 1)
            if (i, j) not in occupied
        ]
        self.food = random.choice(vacant) if vacant else (1, 1)

    def _is_in_bounds(self, pos: Pos) -> bool:
        return 1 <= pos[0] <= self.size and 1 <= pos[1] <= self.size

    def _state(self) -> tuple[bool, ...]:
        """Facing (4), food direction (4) and danger (4) flags, each ordered up, right, down, left."""
        features = [False] * 12
        features[int(self.snake.direction)] = True

        head = self.snake.head()
        if self.food[1] > head[1]:
            features[6] = True
        elif self.food[1] < head[1]:
            features[4] = True
        if self.food[0] > head[0]:
            features[5] = True
        elif self.food[0] < head[0]:
            features[7] = True

        body = set(self.snake.body)
        for direction in Dir:
            pos = step_dir(head, direction)
            features[8 + int(direction)] = not self._is_in_bounds(pos) or pos in body

        return tuple(features)

    def actions(self) -> list[Dir]:
        """All directions."""
        return list(Dir)

    def is_active(self) -> bool:
        """Whether the snake is alive and has not filled the field."""
        return (
            self._is_in_bounds(self.snake.head())
            and not self.snake.is_intersecting()
            and len(self.snake) < self.size * self.size
        )

    def random_action(self) -> Dir:
        """A uniformly chosen direction."""
        return random.choice(list(Dir))

    def reset(self) -> tuple[bool, ...]:
        """Spawn a new snake and food; return the initial state."""
        self.snake = spawn_snake(self.size)
        self._spawn_food()
        return self._state()

    def step(self, action: Dir) -> tuple[Optional[tuple[bool, ...]], float]:
        """Advance the snake one cell; return the next state (``None`` if over) and the reward."""
        self.report["steps"] += 1.0
        reward = -0.01

        head = self.snake.head()
        direction = self.snake.turn(action)
        self.snake.body.appendleft(step_dir(head, direction))

        if self.snake.head() == self.food:
            self.report["score"] += 1.0
            self._spawn_food()
            reward = 1.0
        else:
            self.snake.body.pop()

        if self.is_active():
            next_state = self._state()
        else:
            reward = -10.0 if len(self.snake) < self.size * self.size else 1.0
            next_state = None

        self.report["reward"] += reward
        return next_state, reward