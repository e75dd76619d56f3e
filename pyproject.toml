[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridgraph"
version = "0.1.0"
description = "Grids, matrices and graph algorithms: assignment, topological sorting, connected components and spanning trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "grid",
    "matrix",
    "graph",
    "hungarian-algorithm",
    "kuhn-munkres",
    "assignment",
    "topological-sort",
    "connected-components",
    "kruskal",
    "minimum-spanning-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridgraph"]

[tool.hatch.build.targets.sdist]
include = ["gridgraph", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
