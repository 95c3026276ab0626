[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "epaplace"
version = "0.1.0"
description = "Helpers for phylogenetic placement workflows: model file parsing, alignment splitting, sequence I/O and small supporting data structures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "phylogenetics",
    "phylogenetic placement",
    "bioinformatics",
    "fasta",
    "phylip",
    "substitution model",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["epaplace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
