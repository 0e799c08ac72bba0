[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scopetab"
version = "0.1.0"
description = "Scoped, hash-bucketed symbol tables for compiler front ends, with a command-driven driver and parse-tree printing"
requires-python = ">=3.10"
dependencies = []
keywords = ["symbol table", "scope", "compiler", "parse tree", "hash table"]
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
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scopetab = "scopetab.commands:main"

[tool.hatch.build.targets.wheel]
packages = ["scopetab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
