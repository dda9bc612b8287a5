[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eightbit"
version = "0.1.0"
description = "Display models, keyboard controls and timing helpers for an emulated 8-bit breadboard computer"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "8-bit", "computer", "breadboard", "cpu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eightbit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
