[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and algorithms: searching, string editing, binary trees, heaps and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "graphs", "trees", "heaps", "searching"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["dsakit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
