[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compbench"
version = "0.1.0"
description = "Micro-benchmark suite that records results in a binary container format, summarises them per compiler and draws comparison plots"
requires-python = ">=3.10"
keywords = ["benchmark", "compiler", "performance", "plot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
compbench = "compbench.bench:main"
compbench-top10 = "compbench.top10:main"
compbench-graph = "compbench.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["compbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
