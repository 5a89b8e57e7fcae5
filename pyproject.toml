[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "churnpipe"
version = "0.1.0"
description = "Telco churn CSV pipeline: sorting, searching, MST over customer groups and 0-1 knapsack bandwidth allocation"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "mergesort", "binary-search", "kruskal", "knapsack", "churn"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
churnpipe = "churnpipe.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["churnpipe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
