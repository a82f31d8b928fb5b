[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flyconomy"
version = "0.1.3"
description = "Economic simulation model of an airline: aerodromes, planes, bases, flights, finances and analytics."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["simulation", "airline", "economy", "game", "aviation"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["flyconomy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
