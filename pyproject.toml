[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelplay"
version = "0.1.0"
description = "A falling-block puzzle game and animated sorting-algorithm visualizers built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "tetris",
    "falling blocks",
    "puzzle",
    "sorting",
    "visualization",
    "algorithms",
    "pygame",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelplay-tetris = "pixelplay.tetris:main"
pixelplay-sort = "pixelplay.visualizer:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelplay"]

[tool.hatch.build.targets.sdist]
include = [
    "pixelplay",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
