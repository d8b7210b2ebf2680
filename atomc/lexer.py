"""Tokenizer for the AtomC source language."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass

__all__ = ["TokenType", "Token", "LexError", "format_token", "tokenize", "tokenize_file"]


class TokenType(enum.Enum):
    """Kinds of token produced by the lexer."""

    BEGINNING = enum.auto()
    INT = enum.auto()
    KEYWORD = enum.auto()
    SEPARATOR = enum.auto()
    OPERATOR = enum.auto()
    IDENTIFIER = enum.auto()
    STRING = enum.auto()
    COMP = enum.auto()
    END_OF_TOKENS = enum.auto()


@dataclass(frozen=True)
class Token:
    """A single lexical token with the line it started on."""

    type: TokenType
    value: str
    line: int = 1


class LexError(ValueError):
    """Raised when the source text cannot be tokenized."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"{message} (line {line})")
        self.line = line


_WORDS: dict[str, tuple[TokenType, str]] = {
    "exit": (TokenType.KEYWORD, "EXIT"),
    "int": (TokenType.KEYWORD, "INT"),
    "if": (TokenType.KEYWORD, "IF"),
    "while": (TokenType.KEYWORD, "WHILE"),
    "write": (TokenType.KEYWORD, "WRITE"),
    "less": (TokenType.COMP, "LESS"),
    "greater": (TokenType.COMP, "GREATER"),
    "eq": (TokenType.COMP, "EQ"),
    "neq": (TokenType.COMP, "NEQ"),
}

_TYPE_LABELS: dict[TokenType, str] = {
    TokenType.INT: "TOKEN TYPE: INT",
    TokenType.KEYWORD: "TOKEN TYPE: KEYWORD",
    TokenType.SEPARATOR: "TOKEN TYPE: SEPARATOR",
    TokenType.OPERATOR: "TOKEN TYPE: OPERATOR",
    TokenType.IDENTIFIER: "TOKEN TYPE: IDENTIFIER",
    TokenType.STRING: "TOKEN TYPE: STRING",
    TokenType.COMP: "TOKEN TYPE COMP",
    TokenType.BEGINNING: "BEGINNING",
    TokenType.END_OF_TOKENS: "END_OF_TOKENS",
}

_SCANNER = re.compile(
    r"""
    (?P<number>[0-9]+)
    | (?P<word>[A-Za-z]+)
    | (?P<separator>[;,(){}])
    | (?P<operator>[=+\-*/%])
    | (?P<string>"[^"]*")
    | (?P<unterminated>")
    | (?P<newline>\n)
    | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)


def format_token(token: Token) -> str:
    """Describe a token in two lines: its value and line, then its type."""
    return (
        f"TOKEN VALUE: '{token.value}' line number: {token.line}\n"
        f"{_TYPE_LABELS[token.type]}"
    )


def tokenize(source: str) -> list[Token]:
    """Split source text into tokens, ending with an END_OF_TOKENS token.

    Characters that start no token (whitespace and unknown symbols) are skipped.
    """
    tokens: list[Token] = []
    line = 1
    for match in _SCANNER.finditer(source):
        kind = match.lastgroup
        text = match.group()
        if kind == "number":
            tokens.append(Token(TokenType.INT, text, line))
        elif kind == "word":
            token_type, value = _WORDS.get(text, (TokenType.IDENTIFIER, text))
            tokens.append(Token(token_type, value, line))
        elif kind == "separator":
            tokens.append(Token(TokenType.SEPARATOR, text, line))
        elif kind == "operator":
            tokens.append(Token(TokenType.OPERATOR, text, line))
        elif kind == "string":
            tokens.append(Token(TokenType.STRING, text[1:-1], line))
        elif kind == "unterminated":
            raise LexError("unterminated string literal", line)
        elif kind == "newline":
            line += 1
    tokens.append(Token(TokenType.END_OF_TOKENS, "", line))
    return tokens


def tokenize_file(path: str | os.PathLike[str]) -> list[Token]:
    """Read a source file and tokenize its contents."""
    with open(path, encoding="utf-8") as handle:
        return tokenize(handle.read())