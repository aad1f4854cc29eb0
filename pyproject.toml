[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolver"
version = "0.1.0"
description = "Solvers for the 2023 Advent of Code puzzles, with small helpers for reading puzzle input."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2023"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
aoc-day01 = "adventsolver.day01:main"
aoc-day02 = "adventsolver.day02:main"
aoc-day03 = "adventsolver.day03:main"
aoc-day05 = "adventsolver.day05:main"
aoc-day06 = "adventsolver.day06:main"
aoc-day07 = "adventsolver.day07:main"
aoc-day08 = "adventsolver.day08:main"
aoc-day09 = "adventsolver.day09:main"
aoc-day10 = "adventsolver.day10:main"
aoc-day11 = "adventsolver.day11:main"
aoc-day12 = "adventsolver.day12:main"
aoc-day13 = "adventsolver.day13:main"
aoc-day14 = "adventsolver.day14:main"
aoc-day15 = "adventsolver.day15:main"
aoc-day16 = "adventsolver.day16:main"
aoc-day18 = "adventsolver.day18:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
