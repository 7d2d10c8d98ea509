[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonterm"
version = "1.0.0"
description = "Building blocks for a terminal role-playing game: rotating logger, memory pool, localization, input translation, an in-memory screen and menus."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "game", "rpg", "menu", "localization", "logging", "memory-pool"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeonterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
