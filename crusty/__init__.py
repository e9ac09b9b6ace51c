"""A lexer with diagnostics, plus AST and precedence definitions, for a subset of C."""

__version__ = "0.1.0"