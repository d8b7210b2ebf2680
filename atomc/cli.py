"""Command-line entry point: tokenize and parse an AtomC source file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from atomc.lexer import LexError, TokenType, format_token, tokenize_file
from atomc.parser import ParseError, parse

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tokens of a source file, then parse it. Returns an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("ERROR: correct syntax: atomc <filename.un>")
        return 1

    try:
        tokens = tokenize_file(args[0])
    except OSError:
        print("ERROR opening the file!")
        return 1
    except LexError as error:
        print(f"ERROR: {error}")
        return 1

    for token in tokens:
        if token.type is TokenType.END_OF_TOKENS:
            break
        print(format_token(token))

    try:
        parse(tokens, trace=print)
    except ParseError as error:
        print(f"ERROR: {error.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())