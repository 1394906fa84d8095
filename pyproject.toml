[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "breakout"
version = "0.1.0"
description = "A small Breakout arcade game with a fixed-timestep simulation, built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["breakout", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
breakout = "breakout.main:main"

[tool.hatch.build.targets.wheel]
packages = ["breakout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
