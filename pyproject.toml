[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rltoolkit"
version = "0.4.0"
description = "Reinforcement learning building blocks: replay memories, toy environments and training plot state"
requires-python = ">=3.10"
dependencies = []
keywords = ["rl", "reinforcement-learning", "machine-learning", "ai", "replay-memory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rltoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
