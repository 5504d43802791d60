[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfsolve"
version = "0.1.0"
description = "Solvers for six short algorithmic puzzles, usable as functions or as commands reading standard input"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "competitive-programming"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cover-in-water = "cfsolve.cover_in_water:main"
doremys-paint = "cfsolve.doremys_paint:main"
game-in-integers = "cfsolve.game_in_integers:main"
halloumi-boxes = "cfsolve.halloumi_boxes:main"
jagged-swap = "cfsolve.jagged_swap:main"
line-trip = "cfsolve.line_trip:main"

[tool.hatch.build.targets.wheel]
packages = ["cfsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
