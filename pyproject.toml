[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tacticgrid"
version = "0.1.0"
description = "A small grid-based tactics game with units, weapons and an animated tile map"
requires-python = ">=3.10"
keywords = ["game", "tactics", "strategy", "grid", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tacticgrid = "tacticgrid.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tacticgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
