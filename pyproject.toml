[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstructs"
version = "0.1.0"
description = "Classic data structures: hash tables, heaps, search trees, threaded trees and expression trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "hash-table",
    "double-hashing",
    "linear-probing",
    "separate-chaining",
    "heap",
    "heap-sort",
    "priority-queue",
    "avl",
    "binary-search-tree",
    "threaded-binary-tree",
    "expression-tree",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dstructs-double-hashing = "dstructs.double_hashing:main"
dstructs-linear-probing = "dstructs.linear_probing:main"
dstructs-open-hashing = "dstructs.open_hashing:main"
dstructs-heap-sort = "dstructs.heap_sort:main"
dstructs-priority-queue = "dstructs.priority_queue:main"
dstructs-avl = "dstructs.avl:main"
dstructs-bst = "dstructs.bst:main"
dstructs-binary-tree = "dstructs.binary_tree:main"
dstructs-expression-tree = "dstructs.expression_tree:main"
dstructs-right-threaded = "dstructs.right_threaded:main"
dstructs-left-threaded = "dstructs.left_threaded:main"

[tool.hatch.build.targets.wheel]
packages = ["dstructs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
