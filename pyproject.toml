[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookcatalog"
version = "0.1.0"
description = "A small in-memory library catalog of categories and books, with per-author binary export files."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "catalog", "books", "categories"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookcatalog-demo = "bookcatalog.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["bookcatalog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
