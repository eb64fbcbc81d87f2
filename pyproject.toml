[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdbview"
version = "0.4.1"
description = "Module trees, list filtering and selectable index lists for browsing type and symbol information from PDB files."
requires-python = ">=3.10"
dependencies = []
keywords = ["pdb", "debugging", "symbols", "types", "modules", "filtering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdbview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
