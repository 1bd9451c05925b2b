[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estante"
version = "0.1.0"
description = "A small interactive terminal catalog for managing a library's book stock and loans"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "catalog", "loans", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estante = "estante.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["estante"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
