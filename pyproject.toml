[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombiefield"
version = "0.1.0"
description = "A small top-down pygame scene with a scrolling tile map and zombies you can spawn and hit"
requires-python = ">=3.10"
keywords = ["game", "pygame", "tilemap", "sprites", "zombies"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zombiefield = "zombiefield.game:main"

[tool.hatch.build.targets.wheel]
packages = ["zombiefield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
