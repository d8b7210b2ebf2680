"""Lexer and parser for a tiny AtomC-style language, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "cli"]