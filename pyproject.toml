[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyrohex"
version = "0.1.0"
description = "Forest fire simulation and game on a hexagonal grid"
requires-python = ">=3.10"
keywords = ["forest fire", "percolation", "hexagonal grid", "simulation", "cellular automaton"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pyrohex = "pyrohex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pyrohex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
