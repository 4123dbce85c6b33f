[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csesalgo"
version = "0.1.0"
description = "Solutions to classic algorithm problems: graphs, grids, trees, strings and combinatorics"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "graphs", "trees", "combinatorics", "disjoint-set", "kmp", "lca"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["csesalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
