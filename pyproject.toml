[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kbiolib"
version = "0.1.0"
description = "Range-minimum AVL tree, xoroshiro128+ style RNG, FASTA/FASTQ reader and in-place sorting routines"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "range-minimum-query", "fasta", "fastq", "sorting", "rng", "bioinformatics"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
kbiolib-seq = "kbiolib.seqio:main"

[tool.hatch.build.targets.wheel]
packages = ["kbiolib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
