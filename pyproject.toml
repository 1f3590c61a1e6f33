[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsreview"
version = "0.1.0"
description = "Classic data structures and algorithms: hashing, heaps, graphs, searches, sorts, trees and tries."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "heap",
    "graph",
    "trie",
    "fnv",
    "binary-search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsreview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
