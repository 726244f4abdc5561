[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocpuzzles"
version = "0.1.0"
description = "Solvers for a season of daily programming puzzles: grids, parsing, search and simulation."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "algorithms", "grid", "bfs", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocpuzzles = "aocpuzzles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocpuzzles"]

[tool.pytest.ini_options]
addopts = "-ra"
