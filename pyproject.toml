[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsapractice"
version = "0.1.0"
description = "Small, readable implementations of classic searching, sorting and linked data structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "sorting", "searching", "queue", "linked list", "binary tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsa-search = "dsapractice.searching:main"
dsa-benchmark = "dsapractice.benchmark:main"
dsa-queue = "dsapractice.bounded_queue:main"
dsa-tree = "dsapractice.binary_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["dsapractice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
