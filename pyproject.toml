[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bermap"
version = "0.1.0"
description = "Validator for .ber tile maps, with a small toolkit of C-style string, memory and formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ber", "map", "validation", "tile", "grid", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bermap = "bermap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bermap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
