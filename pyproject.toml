[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ordenaciones"
version = "0.1.0"
description = "Sorting algorithms with step traces, NIF keys and binary trees (search, size-balanced, AVL)."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "algorithms",
    "quicksort",
    "heapsort",
    "shellsort",
    "radix sort",
    "binary tree",
    "avl",
    "data structures",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
ordenaciones-sort = "ordenaciones.sort_cli:main"
ordenaciones-trees = "ordenaciones.tree_cli:main"
ordenaciones-classic = "ordenaciones.classic_cli:main"

[tool.setuptools.packages.find]
include = ["ordenaciones*"]

[tool.pytest.ini_options]
addopts = "-ra"
