[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towertumbler"
version = "0.1.0"
description = "A block stacking game with tilt-driven gravity"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "stacking", "physics", "tilt", "pygame"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
towertumbler = "towertumbler.app:main"

[tool.hatch.build.targets.wheel]
packages = ["towertumbler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
