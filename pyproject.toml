[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classiclauncher"
version = "0.1.0"
description = "Core pieces of a game launcher front end: sprites, render scaling, on-screen messages and utilities"
requires-python = ">=3.10"
keywords = ["launcher", "emulation", "frontend", "sprites", "games"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["classiclauncher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
