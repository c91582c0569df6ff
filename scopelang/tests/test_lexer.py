"""
Tests for the scopelang lexer.
"""
import pytest

from scopelang.exceptions import LexError
from scopelang.lexer import TokenKind, iter_tokens, tokenize


def kinds_and_values(source: str):
    return [(tok.kind, tok.value) for tok in tokenize(source)]


def test_whitespace_only_input_is_just_eof():
    """
    Whitespace of any kind lexes to a single end-of-input token.
    """
    tokens = tokenize("  \n\t \r\n  ")
    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.EOF


def test_unicode_whitespace_is_skipped():
    tokens = tokenize("\u00a0x\u2003=\u30001\n")
    assert [(tok.value, tok.column) for tok in tokens[:-1]] == [("x", 2), ("=", 4), ("1", 6)]


def test_empty_input_is_just_eof():
    tokens = tokenize("")
    assert [tok.kind for tok in tokens] == [TokenKind.EOF]


def test_integers_identifiers_and_keywords():
    assert kinds_and_values("while x1 fn return_value 42") == [
        (TokenKind.KEYWORD, "while"),
        (TokenKind.IDENTIFIER, "x1"),
        (TokenKind.KEYWORD, "fn"),
        (TokenKind.IDENTIFIER, "return_value"),
        (TokenKind.INTEGER, "42"),
        (TokenKind.EOF, ""),
    ]


def test_keyword_prefix_is_identifier():
    """
    Only an exact keyword match is a keyword.
    """
    assert kinds_and_values("iffy elsewhere")[:2] == [
        (TokenKind.IDENTIFIER, "iffy"),
        (TokenKind.IDENTIFIER, "elsewhere"),
    ]


def test_digits_then_letters_split():
    assert kinds_and_values("12ab")[:2] == [
        (TokenKind.INTEGER, "12"),
        (TokenKind.IDENTIFIER, "ab"),
    ]


def test_longest_match_operators():
    values = [tok.value for tok in tokenize("a==b = c != d <= e >= f && g || !h")]
    assert values[:-1] == [
        "a", "==", "b", "=", "c", "!=", "d", "<=", "e", ">=", "f", "&&", "g", "||", "!", "h",
    ]


def test_punctuation():
    tokens = tokenize("f(a, b) { }")
    assert [tok.kind for tok in tokens if tok.value in "(),{}" and tok.value] == [
        TokenKind.PUNCTUATION
    ] * 5


def test_positions_track_lines_and_columns():
    tokens = tokenize("x = 1\n  y = 22\n")
    y = tokens[3]
    assert (y.value, y.line, y.column) == ("y", 2, 3)
    twenty_two = tokens[5]
    assert (twenty_two.line, twenty_two.column) == (2, 7)


def test_invalid_character_raises_with_position():
    with pytest.raises(LexError) as excinfo:
        tokenize("x = 1\ny = $")
    err = excinfo.value
    assert err.line == 2
    assert err.column == 5
    assert "'$'" in str(err)


def test_identifier_must_start_with_letter():
    with pytest.raises(LexError):
        tokenize("_x = 1")


def test_iter_tokens_is_lazy():
    """
    Tokens before an invalid character are produced before the error.
    """
    stream = iter_tokens("a b @")
    assert next(stream).value == "a"
    assert next(stream).value == "b"
    with pytest.raises(LexError):
        next(stream)
