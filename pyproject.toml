[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "remedy"
version = "1.0.0"
description = "A top-down field exploration game with tile maps, collision lines and map transitions."
requires-python = ">=3.10"
keywords = ["game", "rpg", "pygame", "tiled", "field"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
remedy = "remedy.app:main"

[tool.setuptools.packages.find]
include = ["remedy*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
