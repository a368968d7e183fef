[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dntrpg"
version = "0.1.0"
description = "A turn-based terminal battle between two parties of fantasy characters"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "terminal", "curses", "turn-based", "battle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
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
dnt-rpg = "dntrpg.battle:main"

[tool.setuptools.packages.find]
include = ["dntrpg*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
