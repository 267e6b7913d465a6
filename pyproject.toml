[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyperbench"
version = "0.1.0"
description = "Benchmarking building blocks: duration formatting, outlier statistics, parameter scans, session options and CSV/JSON result exports"
requires-python = ">=3.10"
keywords = ["benchmark", "timing", "statistics", "outliers", "csv", "json"]
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
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hyperbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
