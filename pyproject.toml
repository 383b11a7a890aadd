[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastpkit"
version = "0.21.0"
description = "Building blocks for FASTQ preprocessing: filter result codes, sequence helpers, plain and gzip output writers, a small command-line parser and a table of known sequencing adapters."
requires-python = ">=3.10"
dependencies = []
keywords = ["fastq", "sequencing", "adapters", "bioinformatics", "ngs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
packages = ["fastpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
