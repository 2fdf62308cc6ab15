[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dungeon_crawl"
version = "0.1.0"
description = "A small turn-based dungeon crawler on a text board, with items, enemies, a repair centre and save games."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "terminal", "rpg", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
dungeon-crawl = "dungeon_crawl.game:main"

[tool.setuptools.packages.find]
include = ["dungeon_crawl*"]

[tool.pytest.ini_options]
addopts = "-ra"
