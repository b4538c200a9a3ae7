[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edatos"
version = "1.0.0"
description = "Classic data structures and algorithms: circular arrays, linked lists, stacks, heaps, priority queues, binary trees, AVL tree nodes, hash table entries and weighted graphs with Dijkstra's shortest paths."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "circular array",
    "linked list",
    "stack",
    "heap",
    "heapsort",
    "priority queue",
    "binary tree",
    "avl",
    "graph",
    "dijkstra",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edatos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
