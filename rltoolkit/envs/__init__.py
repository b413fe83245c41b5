"""Toy reinforcement learning environments: frozen lake, snake, K-armed bandit, pendulum and windy gridworld."""

__all__ = ["frozen_lake", "grassy_field", "k_armed_bandit", "pendulum", "windy_gridworld"]