[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oathquests"
version = "0.1.0"
description = "Quest, resource, inventory and HUD logic for a fantasy kingdom-building role-playing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "quests", "inventory", "resources", "hud"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oathquests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
