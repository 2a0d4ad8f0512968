[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocpuzzles"
version = "0.1.0"
description = "Solvers for a set of grid, graph and simulation puzzles: beacon zones, valve networks, falling rocks and lava cubes."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "puzzles",
    "simulation",
    "manhattan-distance",
    "graph-search",
    "cycle-detection",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
aoc-show-file = "aocpuzzles.text_file_reader:main"
aoc-beacon-zone = "aocpuzzles.beacon_zone:main"
aoc-valves = "aocpuzzles.hydraulic_network:main"
aoc-elephant-valves = "aocpuzzles.elephant:main"
aoc-rock-tower = "aocpuzzles.rock_tower:main"
aoc-lava-cubes = "aocpuzzles.cubes:main"

[tool.hatch.build.targets.wheel]
packages = ["aocpuzzles"]

[tool.pytest.ini_options]
addopts = "-ra"
