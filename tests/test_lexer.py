import pytest

from atomc.lexer import LexError, Token, TokenType, format_token, tokenize, tokenize_file


def _pairs(tokens):
    return [(t.type, t.value) for t in tokens]


def test_exit_statement():
    tokens = tokenize("exit(1);")
    assert _pairs(tokens) == [
        (TokenType.KEYWORD, "EXIT"),
        (TokenType.SEPARATOR, "("),
        (TokenType.INT, "1"),
        (TokenType.SEPARATOR, ")"),
        (TokenType.SEPARATOR, ";"),
        (TokenType.END_OF_TOKENS, ""),
    ]


@pytest.mark.parametrize(
    "word, expected",
    [
        ("exit", (TokenType.KEYWORD, "EXIT")),
        ("int", (TokenType.KEYWORD, "INT")),
        ("if", (TokenType.KEYWORD, "IF")),
        ("while", (TokenType.KEYWORD, "WHILE")),
        ("write", (TokenType.KEYWORD, "WRITE")),
        ("less", (TokenType.COMP, "LESS")),
        ("greater", (TokenType.COMP, "GREATER")),
        ("eq", (TokenType.COMP, "EQ")),
        ("neq", (TokenType.COMP, "NEQ")),
    ],
)
def test_reserved_words(word, expected):
    first = tokenize(word)[0]
    assert (first.type, first.value) == expected


def test_identifier_keeps_its_text():
    first = tokenize("counter")[0]
    assert first.type is TokenType.IDENTIFIER
    assert first.value == "counter"


def test_identifier_stops_at_digit():
    assert _pairs(tokenize("ab12"))[:2] == [
        (TokenType.IDENTIFIER, "ab"),
        (TokenType.INT, "12"),
    ]


@pytest.mark.parametrize("symbol", list(";,(){}"))
def test_separators(symbol):
    assert _pairs(tokenize(symbol))[0] == (TokenType.SEPARATOR, symbol)


@pytest.mark.parametrize("symbol", list("=+-*/%"))
def test_operators(symbol):
    assert _pairs(tokenize(symbol))[0] == (TokenType.OPERATOR, symbol)


def test_string_literal_without_quotes():
    tokens = tokenize('write("hello world");')
    assert tokens[2].type is TokenType.STRING
    assert tokens[2].value == "hello world"
    assert tokens[3].value == ")"


def test_unterminated_string_raises():
    with pytest.raises(LexError):
        tokenize('write("oops);')


def test_whitespace_and_unknown_are_skipped():
    assert _pairs(tokenize("  1 \t< 2 ")) == [
        (TokenType.INT, "1"),
        (TokenType.INT, "2"),
        (TokenType.END_OF_TOKENS, ""),
    ]


def test_empty_source_only_end_marker():
    assert _pairs(tokenize("")) == [(TokenType.END_OF_TOKENS, "")]


def test_line_numbers_advance_on_newline():
    tokens = tokenize("exit\n(\n\n1")
    assert [t.line for t in tokens[:3]] == [1, 2, 4]


def test_always_ends_with_single_end_marker():
    tokens = tokenize("int x = 5 + 3;\nexit(x);")
    assert tokens[-1].type is TokenType.END_OF_TOKENS
    assert sum(t.type is TokenType.END_OF_TOKENS for t in tokens) == 1


def test_expression_tokens():
    assert [t.value for t in tokenize("1+2*3")[:-1]] == ["1", "+", "2", "*", "3"]


def test_format_token_int():
    text = format_token(Token(TokenType.INT, "42", 3))
    assert text.splitlines() == ["TOKEN VALUE: '42' line number: 3", "TOKEN TYPE: INT"]


def test_format_token_comp_label():
    text = format_token(Token(TokenType.COMP, "LESS", 1))
    assert text.splitlines()[1] == "TOKEN TYPE COMP"


def test_format_token_end_marker():
    text = format_token(Token(TokenType.END_OF_TOKENS, "", 1))
    assert text.splitlines()[1] == "END_OF_TOKENS"


def test_tokenize_file_matches_tokenize(tmp_path):
    source = "exit(7);\n"
    path = tmp_path / "prog.un"
    path.write_text(source, encoding="utf-8")
    assert tokenize_file(path) == tokenize(source)


def test_tokenize_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        tokenize_file(tmp_path / "missing.un")