"""Experience replay memories."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Optional, TypeVar

S = TypeVar("S")
A = TypeVar("A")
T = TypeVar("T")


@dataclass
class Exp(Generic[S, A]):
    """A single transition; ``next_state`` is ``None`` when terminal."""

    state: S
    action: A
    reward: float
    next_state: Optional[S]


@dataclass
class ExpBatch(Generic[S, A]):
    """A batch of experiences zipped into parallel lists."""

    states: list = field(default_factory=list)
    actions: list = field(default_factory=list)
    rewards: list = field(default_factory=list)
    next_states: list = field(default_factory=list)


def zip_experiences(experiences: Iterable[Exp]) -> ExpBatch:
    """Zip experiences into an :class:`ExpBatch`."""
    batch = ExpBatch()
    for exp in experiences:
        batch.states.append(exp.state)
        batch.actions.append(exp.action)
        batch.rewards.append(exp.reward)
        batch.next_states.append(exp.next_state)
    return batch


class _RingBuffer(Generic[T]):
    """Fixed-capacity storage that overwrites the oldest item when full."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[T] = []
        self._next = 0

    def push(self, item: T) -> int:
        if len(self._items) < self._capacity:
            self._items.append(item)
            return len(self._items) - 1
        ix = self._next
        self._items[ix] = item
        self._next = (ix + 1) % self._capacity
        return ix

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, ix: int) -> T:
        return self._items[ix]

    @property
    def items(self) -> list[T]:
        return self._items


class _SumTree:
    """Binary tree over leaf priorities tracking sums and maxima."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        size = 1
        while size < capacity:
            size *= 2
        self._size = size
        self._sums = [0.0] * (2 * size)
        self._maxes = [0.0] * (2 * size)

    def update(self, ix: int, value: float) -> None:
        if not 0 <= ix < self._capacity:
            raise IndexError(f"index {ix} out of range for capacity {self._capacity}")
        node = ix + self._size
        self._sums[node] = value
        self._maxes[node] = value
        node //= 2
        while node >= 1:
            left, right = 2 * node, 2 * node + 1
            self._sums[node] = self._sums[left] + self._sums[right]
            self._maxes[node] = max(self._maxes[left], self._maxes[right])
            node //= 2

    def total(self) -> float:
        return self._sums[1]

    def max(self) -> float:
        return self._maxes[1]

    def find(self, value: float) -> int:
        node = 1
        while node < self._size:
            left = 2 * node
            if value < self._sums[left]:
                node = left
            else:
                value -= self._sums[left]
                node = left + 1
        return node - self._size

    def __getitem__(self, ix: int) -> float:
        return self._sums[ix + self._size]


class ReplayMemory:
    """Uniform replay memory backed by a ring buffer."""

    def __init__(self, capacity: int, batch_size: int) -> None:
        self._memory: _RingBuffer[Exp] = _RingBuffer(capacity)
        self.batch_size = batch_size

    def __len__(self) -> int:
        return len(self._memory)

    def push(self, exp: Exp) -> None:
        """Store an experience, overwriting the oldest when full."""
        self._memory.push(exp)

    def sample(self) -> Optional[list[Exp]]:
        """Sample a batch without replacement, or ``None`` if too few are stored."""
        if self.batch_size > len(self._memory):
            return None
        return random.sample(self._memory.items, self.batch_size)

    def sample_zipped(self) -> Optional[ExpBatch]:
        """Like :meth:`sample` but zipped into an :class:`ExpBatch`."""
        experiences = self.sample()
        if experiences is None:
            return None
        return zip_experiences(experiences)


class PrioritizedReplayMemory:
    """Replay memory sampling experiences in proportion to their TD-error priority.

    ``alpha`` is the prioritization exponent; ``beta_0`` is the starting
    importance-sampling exponent, annealed linearly to 1 over ``num_episodes``.
    """

    _MIN_PRIORITY = 1e-5

    def __init__(
        self,
        capacity: int,
        batch_size: int,
        alpha: float,
        beta_0: float,
        num_episodes: int,
    ) -> None:
        if num_episodes <= 0:
            raise ValueError("num_episodes must be positive")
        self._memory: _RingBuffer[Exp] = _RingBuffer(capacity)
        self._priorities = _SumTree(capacity)
        self.alpha = alpha
        self._beta_0 = beta_0
        self._num_episodes = num_episodes
        self.batch_size = batch_size

    def __len__(self) -> int:
        return len(self._memory)

    def push(self, exp: Exp) -> None:
        """Store an experience with the current maximum priority."""
        ix = self._memory.push(exp)
        self._priorities.update(ix, max(self._priorities.max(), self._MIN_PRIORITY))

    def max_priority(self) -> float:
        """The largest stored priority."""
        return self._priorities.max()

    def total_priority(self) -> float:
        """The sum of all stored priorities."""
        return self._priorities.total()

    def _beta(self, episode: int) -> float:
        progress = episode / self._num_episodes
        return min(1.0, self._beta_0 + (1.0 - self._beta_0) * progress)

    def _compute_weights(self, episode: int, probs: list[float]) -> list[float]:
        beta = self._beta(episode)
        n = len(self._memory)
        weights = [(n * p) ** -beta for p in probs]
        w_max = max(weights)
        return [w / w_max for w in weights]

    def sample(self, episode: int) -> Optional[tuple[list[Exp], list[float], list[int]]]:
        """Sample a prioritized batch with IS weights and the sampled indices.

        Returns ``None`` if fewer experiences are stored than a batch needs.
        """
        if self.batch_size > len(self._memory):
            return None

        total = self._priorities.total()
        if total <= 0.0:
            raise ValueError("total priority must be positive to sample")

        batch: list[Exp] = []
        probs: list[float] = []
        indices: list[int] = []
        last = len(self._memory) - 1
        for _ in range(self.batch_size):
            ix = min(self._priorities.find(random.uniform(0.0, total)), last)
            batch.append(self._memory[ix])
            probs.append(self._priorities[ix] / total)
            indices.append(ix)

        return batch, self._compute_weights(episode, probs), indices

    def sample_zipped(self, episode: int) -> Optional[tuple[ExpBatch, list[float], list[int]]]:
        """Like :meth:`sample` but with the experiences zipped into an :class:`ExpBatch`."""
        sampled = self.sample(episode)
        if sampled is None:
            return None
        experiences, weights, indices = sampled
        return zip_experiences(experiences), weights, indices

    def update_priorities(self, indices: list[int], td_errors: list[float]) -> None:
        """Set new priorities from the TD errors of previously sampled indices."""
        if len(indices) != len(td_errors):
            raise ValueError("`indices` and `td_errors` must be the same length")
        for ix, tde in zip(indices, td_errors):
            self._priorities.update(ix, abs(tde) ** self.alpha)


Memory = Any