[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ekit"
version = "0.1.0"
description = "Generic containers and a worker pool: array, linked and lock-guarded lists, hash, tree, linked and multi maps, and an on-demand blocking task pool."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "collections",
    "list",
    "linked list",
    "hashmap",
    "treemap",
    "multimap",
    "task pool",
    "thread pool",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["ekit"]

[tool.pytest.ini_options]
addopts = "-ra"
