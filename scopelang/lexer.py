"""Lexer for scopelang.

This lexer performs a single forward pass over the source code using a
combined regular expression of named groups. Each match yields a
:class:`Token` containing its kind, literal text and source position.

Tokens cover integer literals, identifiers, keywords (``if``, ``else``,
``while``, ``fn``, ``return``), operators and punctuation. Whitespace,
newlines included, is insignificant and skipped; it only advances the line
and column counters. The sequence always ends with a single ``EOF`` token.


File: lexer.py
Version: 0.1.0
License: MIT
"""

import logging
import re
from enum import Enum
from typing import Iterator, NamedTuple

from scopelang.exceptions import LexError

logger = logging.getLogger(__name__)


KEYWORDS = frozenset({'if', 'else', 'while', 'fn', 'return'})


class TokenKind(str, Enum):
    """
    Lexical categories.
    """
    INTEGER = "INTEGER"
    IDENTIFIER = "IDENTIFIER"
    KEYWORD = "KEYWORD"
    OPERATOR = "OPERATOR"
    PUNCTUATION = "PUNCTUATION"
    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Token(NamedTuple):
    """
    Represents a lexical token with a kind, literal text and position.
    """
    kind: TokenKind
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind}, {self.value!r}, line={self.line}, column={self.column})"


token_specification: list[tuple[str, str]] = [
    ('INTEGER',     r'[0-9]+'),
    ('IDENTIFIER',  r'[A-Za-z][A-Za-z0-9_]*'),

    # Two-character operators must precede their one-character prefixes
    ('OPERATOR',    r'==|!=|<=|>=|&&|\|\||[-+*/%<>=!]'),
    ('PUNCTUATION', r'[(){},]'),

    # Miscellaneous
    ('NEWLINE',     r'\r\n|\r|\n'),
    ('SKIP',        r'[^\S\r\n]+'),
    ('MISMATCH',    r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)


def iter_tokens(code: str, file: str | None = None) -> Iterator[Token]:
    """
    Lazily convert a string of source code into tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Script name used in error messages.

    Yields:
        Token: Each token in source order, finishing with an ``EOF`` token.

    Raises:
        LexError: If an unexpected character is encountered.
    """
    line_num = 1
    line_start = 0

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind == 'SKIP':
            continue
        if kind == 'MISMATCH':
            raise LexError(f"Unexpected character {value!r}", line_num, column, file)

        if kind == 'IDENTIFIER' and value in KEYWORDS:
            yield Token(TokenKind.KEYWORD, value, line_num, column)
        else:
            yield Token(TokenKind(kind), value, line_num, column)

    yield Token(TokenKind.EOF, '', line_num, len(code) - line_start + 1)


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Script name used in error messages.

    Returns:
        list[Token]: A list of Token instances ending with ``EOF``.

    Raises:
        LexError: If an unexpected character is encountered.
    """
    tokens = list(iter_tokens(code, file))
    logger.debug("Lexed %d tokens from %s", len(tokens), file or "<source>")
    return tokens
