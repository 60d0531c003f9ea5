[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edakit"
version = "1.0.0"
description = "Classic data structures and algorithms for teaching: lists, stacks, queues, search trees, sorting, mazes and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "stack",
    "queue",
    "binary search tree",
    "avl",
    "red-black tree",
    "quicksort",
    "maze",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edakit-parenthesis = "edakit.parenthesis:main"
edakit-cat = "edakit.textfile:main"
edakit-sort = "edakit.sorting:main"
edakit-rbtree = "edakit.rbtree:main"
edakit-maze = "edakit.maze:main"
edakit-labyrinth = "edakit.labyrinth:main"
edakit-image = "edakit.image:main"

[tool.hatch.build.targets.wheel]
packages = ["edakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
