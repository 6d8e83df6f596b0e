[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubblekit"
version = "0.1.0"
description = "Iterative and phase-walk bubble sorts with array generators and self-checking test suites"
requires-python = ">=3.10"
dependencies = []
keywords = ["bubble sort", "sorting", "algorithms", "teaching", "test suite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bubblekit-sort = "bubblekit.iterative:main"
bubblekit-recursive = "bubblekit.recursive:main"
bubblekit-demo = "bubblekit.showcase:main"
bubblekit-suite = "bubblekit.harness:main"
bubblekit-extended-suite = "bubblekit.extended_suite:main"
bubblekit-safe-suite = "bubblekit.safe_suite:main"

[tool.hatch.build.targets.wheel]
packages = ["bubblekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
