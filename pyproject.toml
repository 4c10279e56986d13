[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cs8lab"
version = "0.1.0"
description = "Classic data structures, search algorithms and puzzle models: sorting, Dijkstra, A* for sliding puzzles, n-queens, minesweeper backtracking and autocorrect."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "a-star",
    "dijkstra",
    "sliding-puzzle",
    "minesweeper",
    "n-queens",
    "autocorrect",
    "levenshtein",
    "backtracking",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cs8lab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
