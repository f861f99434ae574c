[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "extreme_fantasia"
version = "0.1.0"
description = "Console setup phase for a two-player card game: opening hands and mulligans, rock-paper-scissors for turn order, and the first energy reveal."
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "mulligan", "janken", "rock-paper-scissors", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
extreme-fantasia = "extreme_fantasia.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["extreme_fantasia"]

[tool.pytest.ini_options]
addopts = "-ra"
