[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventcal"
version = "0.1.0"
description = "Solutions for the 2024 Advent of Code puzzles, with a calendar view of results"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2024"]
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
adventcal = "adventcal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventcal"]

[tool.pytest.ini_options]
addopts = "-ra"
