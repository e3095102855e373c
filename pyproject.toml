[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typerace"
version = "0.1.0"
description = "A terminal typing-speed game that tracks mistakes, words per minute and accuracy."
requires-python = ">=3.10"
keywords = ["typing", "game", "terminal", "tui", "wpm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
typerace = "typerace.app:main"

[tool.hatch.build.targets.wheel]
packages = ["typerace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
