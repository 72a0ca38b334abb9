[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fbdsim"
version = "0.1.0"
description = "Step-by-step simulator for function block diagrams with file input and output"
requires-python = ">=3.10"
dependencies = []
keywords = ["fbd", "function block diagram", "simulation", "signal", "blocks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fbdsim = "fbdsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fbdsim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
