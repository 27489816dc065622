[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pingpong"
version = "0.1.0"
description = "A small paddle-and-ball arcade game played against a computer opponent"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pong", "game", "arcade", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pingpong = "pingpong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pingpong"]

[tool.pytest.ini_options]
addopts = "-ra"
