[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questkit"
version = "0.1.0"
description = "Building blocks for a small text role-playing game: combatants, containers, game objects with components, a rectangle packer and a text-edit engine."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "text-game", "rectangle-packing", "text-editing", "undo", "game-objects"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["questkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
