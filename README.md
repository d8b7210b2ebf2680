# atomc

`atomc` is the front end of a compiler for a very small AtomC-style language.
It turns source text into tokens and builds a syntax tree from them.

## What the language looks like

The lexer recognises:

- keywords `exit`, `int`, `if`, `while`, `write` (token values `EXIT`, `INT`,
  `IF`, `WHILE`, `WRITE`)
- comparison words `less`, `greater`, `eq`, `neq` (token values `LESS`,
  `GREATER`, `EQ`, `NEQ`)
- integers, identifiers (runs of letters) and double-quoted strings
- separators `; , ( ) { }` and operators `= + - * / %`

Whitespace and any other characters are skipped. Each token records the line it
was found on. A string that has no closing quote raises `LexError`.

The parser builds a tree for statements of the form

```
exit(1 + 2 * 3);
```

Operators are grouped from left to right and have no precedence, so the
expression above is read as `(1 + 2) * 3`. The tree's root is a `PROGRAM` node,
and the `exit` statement hangs to its right. All other tokens are passed over.
If an `exit` statement is malformed, `ParseError` is raised with a message such
as `INVALID Syntax on OPEN`, `INVALID Syntax on INT`, `INVALID Syntax on CLOSE`,
`INVALID Syntax on SEMI` or `Expected integer after operator`.

## Installation

```
pip install .
```

## Command line

```
atomc program.un
```

The command prints every token, with its value, line number and type. It then
parses the tokens and prints its progress: a line for each keyword, operator,
separator and integer it meets, and the syntax tree so far after each step.
It exits with status 0 on success. If no file is given, the file cannot be
opened, or the file has a lexical or syntax error, it prints an `ERROR` line
and exits with status 1.

## Library use

```python
from atomc.lexer import tokenize, format_token
from atomc.parser import parse, format_tree

tokens = tokenize("exit(4 - 1);")
for token in tokens:
    print(format_token(token))

tree = parse(tokens)
print(format_tree(tree))
```

The pieces:

- `atomc.lexer.tokenize(source)` returns a list of `Token` objects (`type`,
  `value`, `line`) ending with a `TokenType.END_OF_TOKENS` token.
  `tokenize_file(path)` reads a UTF-8 file and tokenizes it.
- `atomc.lexer.format_token(token)` describes a token in two lines.
- `atomc.parser.parse(tokens, trace=None)` returns the root `Node` (`value`,
  `type`, `left`, `right`). If `trace` is given, it is called with each
  progress message and with the rendered tree after every step.
- `atomc.parser.parse_expression(tokens, position)` parses one expression that
  starts at `position` and returns the tree and the position after it.
- `atomc.parser.format_tree(node, indent=0, label="root")` renders a tree with
  one node per line, each child indented one space more than its parent.

## What it does not do

The package stops at the syntax tree. It does not check meaning, generate code
or run programs. Only `exit` statements are given a tree; declarations,
`if`, `while` and `write` are tokenized but not parsed.

## Running the tests

```
pip install .[test]
pytest
```