[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classic-algos"
version = "0.1.0"
description = "Classic sorting, graph, tree and puzzle algorithms in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "graphs",
    "breadth-first-search",
    "depth-first-search",
    "prim",
    "binary-search-tree",
    "linked-list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["classic_algos"]

[tool.pytest.ini_options]
addopts = "-ra"
