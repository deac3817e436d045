[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treekit"
version = "0.1.0"
description = "Binary search trees, AVL trees and a tree-backed priority queue, with a small sorting benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["bst", "avl", "binary search tree", "priority queue", "data structures"]
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
test = ["pytest", "hypothesis"]

[project.scripts]
treekit-bench = "treekit.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["treekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
