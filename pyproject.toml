[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libshelf"
version = "0.1.0"
description = "A small library catalogue of books and magazines, kept in a plain text file, with an interactive menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "catalogue", "books", "magazines", "borrowing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
libshelf = "libshelf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["libshelf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
