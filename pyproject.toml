[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schemantic"
version = "0.1.0"
description = "Embedding clustering, column search and near-duplicate detection over labelled vectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["embeddings", "clustering", "vector search", "similarity", "deduplication"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["schemantic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
