[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightclue"
version = "0.1.0"
description = "Game logic for a deduction board game: cards, envelope, board map, turns, suggestions and accusations"
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "deduction", "cards", "game logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["knightclue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
