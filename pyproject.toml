[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crusty"
version = "0.1.0"
description = "A lexer, diagnostics and AST front end for a subset of the C language"
requires-python = ">=3.10"
dependencies = []
keywords = ["c", "compiler", "lexer", "scanner", "tokenizer", "ast"]
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
    "Programming Language :: C",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crusty = "crusty.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crusty"]

[tool.pytest.ini_options]
addopts = "-ra"
