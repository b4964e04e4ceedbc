[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aotgame"
version = "0.1.0"
description = "Frame-by-frame battle simulation and player statistics for a base attack and defence game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "tower defense", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aotgame"]

[tool.pytest.ini_options]
addopts = "-ra"
