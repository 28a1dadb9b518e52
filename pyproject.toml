[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polytopia"
version = "0.1.0"
description = "Game model for a tile-based turn-based strategy game: terrain, resources, units, players and random map generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "strategy", "turn-based", "map-generation", "tiles"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polytopia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
