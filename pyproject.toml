[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atomc"
version = "0.1.0"
description = "Lexer and parser front end for a tiny AtomC-style language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "tokenizer", "syntax-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
atomc = "atomc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["atomc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
