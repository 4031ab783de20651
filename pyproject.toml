[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bptree"
version = "0.1.0"
description = "An in-memory B+ tree mapping integer keys to values, with chained leaves and rebalancing on removal"
requires-python = ">=3.10"
dependencies = []
keywords = ["b+tree", "btree", "data-structures", "index", "mapping"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bptree-demo = "bptree.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["bptree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
