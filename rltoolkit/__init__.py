"""Reinforcement learning building blocks: replay memories, toy environments and plot state."""

__version__ = "0.4.0"
__all__ = ["envs", "memory", "plot", "util"]