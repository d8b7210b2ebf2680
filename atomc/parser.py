"""Parser that builds a syntax tree from AtomC tokens."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from atomc.lexer import Token, TokenType

__all__ = ["Node", "ParseError", "format_tree", "parse_expression", "parse"]


@dataclass
class Node:
    """A node of the syntax tree with optional left and right children."""

    value: str
    type: TokenType
    left: Node | None = None
    right: Node | None = None


class ParseError(ValueError):
    """Raised when the token stream does not follow the grammar."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line


def _tree_lines(node: Node | None, indent: int, label: str) -> Iterator[str]:
    if node is None:
        return
    yield f"{' ' * indent}{label} -> {node.value}"
    yield from _tree_lines(node.left, indent + 1, "left")
    yield from _tree_lines(node.right, indent + 1, "right")


def format_tree(node: Node | None, indent: int = 0, label: str = "root") -> str:
    """Render a tree one node per line, children indented by one space."""
    return "\n".join(_tree_lines(node, indent, label))


def _token_at(tokens: Sequence[Token], position: int) -> Token:
    if position < len(tokens):
        return tokens[position]
    line = tokens[-1].line if tokens else 1
    return Token(TokenType.END_OF_TOKENS, "", line)


def parse_expression(tokens: Sequence[Token], position: int) -> tuple[Node, int]:
    """Parse an integer followed by any number of operator-integer pairs.

    Operators group to the left. Returns the expression tree and the position
    of the first token after the expression.
    """
    token = _token_at(tokens, position)
    expression = Node(token.value, TokenType.INT)
    position += 1

    while (operator := _token_at(tokens, position)).type is TokenType.OPERATOR:
        position += 1
        operand = _token_at(tokens, position)
        if operand.type is not TokenType.INT:
            raise ParseError("Expected integer after operator", operand.line)
        position += 1
        expression = Node(
            operator.value,
            TokenType.OPERATOR,
            left=expression,
            right=Node(operand.value, TokenType.INT),
        )
    return expression, position


def _is_separator(token: Token, value: str) -> bool:
    return token.type is TokenType.SEPARATOR and token.value == value


def _parse_exit(
    tokens: Sequence[Token],
    position: int,
    root: Node,
    trace: Callable[[str], object],
) -> int:
    keyword = tokens[position]
    exit_node = Node(keyword.value, TokenType.KEYWORD)
    root.right = exit_node
    position += 1

    token = _token_at(tokens, position)
    if token.type is TokenType.END_OF_TOKENS or not _is_separator(token, "("):
        raise ParseError("INVALID Syntax on OPEN", token.line)
    open_node = Node(token.value, TokenType.SEPARATOR)
    exit_node.left = open_node
    position += 1

    token = _token_at(tokens, position)
    if token.type is not TokenType.INT:
        raise ParseError("INVALID Syntax on INT", token.line)
    trace(f"current token: {token.value}")
    open_node.left, position = parse_expression(tokens, position)

    token = _token_at(tokens, position)
    trace(f"next token: {token.value}")
    if token.type is TokenType.END_OF_TOKENS or not _is_separator(token, ")"):
        raise ParseError("INVALID Syntax on CLOSE", token.line)
    open_node.right = Node(token.value, TokenType.SEPARATOR)
    position += 1

    token = _token_at(tokens, position)
    if token.type is TokenType.END_OF_TOKENS or not _is_separator(token, ";"):
        raise ParseError("INVALID Syntax on SEMI", token.line)
    exit_node.right = Node(token.value, TokenType.SEPARATOR)
    return position + 1


def parse(
    tokens: Sequence[Token],
    trace: Callable[[str], object] | None = None,
) -> Node:
    """Build the program tree from a token sequence.

    The root is a ``PROGRAM`` node; an ``exit(<expression>);`` statement hangs
    to its right. Other tokens are passed over. ``trace``, when given, receives
    progress messages and the tree after every step.
    """

    def emit(message: str) -> None:
        if trace is not None:
            trace(message)

    root = Node("PROGRAM", TokenType.BEGINNING)
    position = 0

    while (token := _token_at(tokens, position)).type is not TokenType.END_OF_TOKENS:
        if token.type is TokenType.KEYWORD:
            emit(f"TOKEN PARSER: {token.value}")
            if token.value == "EXIT":
                position = _parse_exit(tokens, position, root, emit)
            else:
                position += 1
        elif token.type is TokenType.OPERATOR:
            emit(f"OPERATOR: {token.value}")
            position += 1
        elif token.type is TokenType.SEPARATOR:
            emit(f"SEPARATOR: {token.value}")
            position += 1
        elif token.type is TokenType.INT:
            emit(f"INTEGER: {token.value}")
            position += 1
        else:
            position += 1
        if trace is not None:
            trace(format_tree(root))

    return root