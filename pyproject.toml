[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvekit"
version = "0.1.0"
description = "Classic algorithm solutions over plain Python data: dynamic programming, heaps, grids and counting."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "dynamic-programming", "heap", "puzzles", "counting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solvekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
