[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codegolf"
version = "0.1.0"
description = "Test-case generators and site helpers for a code golf puzzle site"
requires-python = ">=3.11"
dependencies = []
keywords = ["code golf", "puzzles", "test cases", "generators"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codegolf"]

[tool.pytest.ini_options]
addopts = "-ra"
