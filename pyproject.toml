[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickpong"
version = "0.1.0"
description = "A small brick-breaking paddle game."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "breakout", "pong", "pygame"]
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
brickpong = "brickpong.game:main"

[tool.hatch.build.targets.wheel]
packages = ["brickpong"]

[tool.pytest.ini_options]
addopts = "-ra"
