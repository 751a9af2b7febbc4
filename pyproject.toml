[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and algorithms: searching, expression conversion, stacks, linked lists, a binary search tree and student records"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "searching",
    "linked-list",
    "circular-list",
    "stack",
    "binary-search-tree",
    "postfix",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
