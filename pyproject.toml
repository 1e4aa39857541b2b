[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hitori"
version = "0.1.0"
description = "Play and solve Hitori puzzles from the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["hitori", "puzzle", "game", "solver", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese",
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
hitori = "hitori.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hitori"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
