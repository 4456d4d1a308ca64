[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocdays"
version = "0.1.0"
description = "Solvers for days 1 to 24 of a programming puzzle calendar, one command per day."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solvers", "grid", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
aoc-lines = "aocdays.data:main"
aoc-day01 = "aocdays.day01:main"
aoc-day02 = "aocdays.day02:main"
aoc-day03 = "aocdays.day03:main"
aoc-day04 = "aocdays.day04:main"
aoc-day05 = "aocdays.day05:main"
aoc-day06 = "aocdays.day06:main"
aoc-day07 = "aocdays.day07:main"
aoc-day08 = "aocdays.day08:main"
aoc-day09 = "aocdays.day09:main"
aoc-day10 = "aocdays.day10:main"
aoc-day11 = "aocdays.day11:main"
aoc-day12 = "aocdays.day12:main"
aoc-day13 = "aocdays.day13:main"
aoc-day14 = "aocdays.day14:main"
aoc-day15 = "aocdays.day15:main"
aoc-day16 = "aocdays.day16:main"
aoc-day17 = "aocdays.day17:main"
aoc-day18 = "aocdays.day18:main"
aoc-day19 = "aocdays.day19:main"
aoc-day20 = "aocdays.day20:main"
aoc-day21 = "aocdays.day21:main"
aoc-day22 = "aocdays.day22:main"
aoc-day23 = "aocdays.day23:main"
aoc-day24 = "aocdays.day24:main"

[tool.hatch.build.targets.wheel]
packages = ["aocdays"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
