# rltoolkit

Small, dependency-free building blocks for reinforcement learning experiments.

## What is inside

- `rltoolkit.memory`: experience replay.
  - `Exp` holds one transition: `state`, `action`, `reward` and `next_state`. `next_state` is `None` when the transition is terminal.
  - `ExpBatch` and `zip_experiences(experiences)` turn a list of transitions into the parallel lists `states`, `actions`, `rewards` and `next_states`.
  - `ReplayMemory(capacity, batch_size)` is a fixed-capacity ring buffer. Once it is full, the oldest experience is overwritten. `sample()` draws a batch uniformly and without replacement. `sample_zipped()` returns the same batch as an `ExpBatch`. Both return `None` while fewer than `batch_size` experiences are stored.
  - `PrioritizedReplayMemory(capacity, batch_size, alpha, beta_0, num_episodes)` samples experiences in proportion to their priority.
    - New experiences get the current maximum priority, or at least `1e-5`.
    - `sample(episode)` returns `(batch, weights, indices)`. The importance-sampling weights use a beta that is annealed linearly from `beta_0` to 1 over `num_episodes`.
    - `update_priorities(indices, td_errors)` sets each priority to `abs(td_error) ** alpha`.
    - `max_priority()` and `total_priority()` report the stored priorities.
- `rltoolkit.envs`: toy environments.
  - `frozen_lake.FrozenLake` is the 4×4 frozen lake. `actions()` lists only the moves that stay on the grid.
  - `grassy_field.GrassyField(size)` is a game of snake on a `size`×`size` field. Its state is 12 boolean flags: facing, food direction and danger, each given for up, right, down and left.
  - `k_armed_bandit.KArmedBandit(k, step_limit, stationary)` is a stationary or drifting K-armed bandit. `take_rewards()` returns the collected reward history.
  - `pendulum.Pendulum(max_steps)` is an inverted pendulum with a continuous torque action. The torque is clamped to ±2. The state is `(cos θ, sin θ, θ̇)`. The module also provides `action_dim()`, `action_bounds()` and `angle_normalize`.
  - `windy_gridworld.WindyGridworld` is the windy gridworld with king's moves and a "stay" move (`WindyAction`).
- `rltoolkit.plot`: the state behind training plots, and the colouring of scatter points by density.
  - `Plot` keeps a metric's points, its bounds and its axis labels.
  - `Plots` is a set of named plots with a selection. It provides `next_plot()`, `prev_plot()` and `selected_plot`, and `update(episode, data)` adds one value per plot.
  - `density_colors(grid_points, gradient)` gives each grid point an `Hsl` colour. The colour is taken along a two-colour gradient according to how many points share its braille cell.
  - `linear_gradient` and `interpolate` are the helpers behind it.
- `rltoolkit.util`: small helpers.
  - `check_interval` raises `ValueError` when a value lies outside `[low, high]`.
  - `format_float` switches to scientific notation for small values.
  - `summary_from_keys` returns a dictionary of zeros.

Every environment offers `reset()`, `step(action)` and `random_action()`. Each one keeps running totals in its `report` dictionary.
`step` returns `(next_state, reward)`; `next_state` is `None` once the episode has ended.

## Install

```
pip install .
```

## Example

```python
from rltoolkit.envs.frozen_lake import FrozenLake
from rltoolkit.memory import Exp, ReplayMemory

env = FrozenLake()
memory = ReplayMemory(capacity=1000, batch_size=32)

for episode in range(100):
    state = env.reset()
    while state is not None:
        action = env.random_action()
        next_state, reward = env.step(action)
        memory.push(Exp(state, action, reward, next_state))
        state = next_state

batch = memory.sample_zipped()
if batch is not None:
    print(len(batch.states), sum(batch.rewards))
```

With prioritized replay, pass the current episode when sampling and feed the temporal-difference errors back:

```python
from rltoolkit.memory import PrioritizedReplayMemory

memory = PrioritizedReplayMemory(capacity=1000, batch_size=32, alpha=0.7, beta_0=0.5, num_episodes=100)
# ... push experiences ...
sampled = memory.sample(episode=10)
if sampled is not None:
    batch, weights, indices = sampled
    td_errors = [0.1] * len(indices)
    memory.update_priorities(indices, td_errors)
```

## What it does not do

- There are no learning agents or algorithms here. You write the agent; the package supplies the memories and environments around it.
- There is no conversion to tensors and no neural-network code.
- `Plot` and `Plots` only hold plot data, bounds, labels and the selection. Nothing draws them to a terminal or a window. There is no live training dashboard and no command-line program.

## Tests

```
pip install .[test]
pytest
```