[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "draughtsmc"
version = "0.1.0"
description = "Bitboard draughts engine with Monte Carlo tree search players"
requires-python = ">=3.10"
dependencies = []
keywords = ["draughts", "checkers", "mcts", "monte-carlo", "bitboard", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
draughtsmc = "draughtsmc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["draughtsmc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
