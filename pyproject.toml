[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenafight"
version = "0.1.0"
description = "A terminal arena battle between fighters drawn from a SQLite store of cities"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arena", "simulation", "terminal", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
arenafight = "arenafight.game:main"

[tool.hatch.build.targets.wheel]
packages = ["arenafight"]

[tool.pytest.ini_options]
addopts = "-ra"
