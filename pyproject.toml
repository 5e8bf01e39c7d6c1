[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ballplate"
version = "0.1.0"
description = "Serial link, telemetry parsing and worker loops for a ball-and-plate balancing rig"
requires-python = ">=3.10"
keywords = ["ball-and-plate", "arduino", "serial", "pid", "control", "telemetry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Topic :: Terminals :: Serial",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ballplate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
