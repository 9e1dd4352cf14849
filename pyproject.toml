[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "millionaire"
version = "1.0.0"
description = "A terminal quiz game: climb a fifteen-rung prize ladder with three lifelines."
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "trivia", "game", "terminal", "millionaire"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
millionaire = "millionaire.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["millionaire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
