"""
Main parser entry point for scopelang.

This module defines the `Parser` class, which holds the token cursor and
coordinates parsing. The actual parsing routines are split across
`scopelang.parser.expressions` and `scopelang.parser.statements`.
"""

import logging

from scopelang.exceptions import ParseError
from scopelang.lexer import Token, TokenKind
from scopelang.nodes import Block, Program

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)


class Parser:
    """scopelang parser."""

    def __init__(self, tokens: list[Token], file: str = "<source>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with ``EOF``.
            file (str): The name of the script.
        """
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("Token list must end with an EOF token")
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file
        # Nesting depth of function bodies, for validating `return`.
        self.function_depth = 0

    def peek(self, offset: int = 1) -> Token:
        """
        Return the token ``offset`` places ahead without consuming anything.
        """
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def check(self, kind: TokenKind, value: str | None = None) -> bool:
        """
        Return True if the current token has the given kind (and text).
        """
        tok = self.curr_token
        return tok.kind == kind and (value is None or tok.value == value)

    def advance(self) -> Token:
        """
        Consume the current token and return it. ``EOF`` is never consumed.
        """
        tok = self.curr_token
        if tok.kind != TokenKind.EOF:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def eat(self, kind: TokenKind, value: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected kind and text.

        Parameters:
            kind (TokenKind): The expected token kind.
            value (str): The expected literal text, if any.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match.
        """
        if self.check(kind, value):
            return self.advance()
        expected = f"'{value}'" if value is not None else f"{kind.value.lower()}"
        raise self.error(f"Expected {expected} but got {self.describe(self.curr_token)}")

    def describe(self, tok: Token) -> str:
        """
        Render a token for error messages.
        """
        if tok.kind == TokenKind.EOF:
            return "end of input"
        return f"{tok.kind.value.lower()} '{tok.value}'"

    def error(self, message: str, tok: Token | None = None) -> ParseError:
        """
        Build a ParseError positioned at ``tok`` (default: current token).
        """
        tok = tok or self.curr_token
        return ParseError(message, tok.line, tok.column, self.source_file)

    # Expression wrappers
    def expr(self):
        """
        Parse a full expression using operator precedence.
        """
        return _expr.parse_expression(self)

    def call_args(self) -> tuple:
        """
        Parse a parenthesized, comma-separated call argument list.
        """
        return _expr.parse_call_args(self)

    # Statement wrappers
    def block(self) -> Block:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_if(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self):
        """
        Parse a 'while' loop statement.
        """
        return _stmt.parse_while(self)

    def parse_func_def(self):
        """
        Parse a function declaration statement.
        """
        return _stmt.parse_func_def(self)

    def parse_return(self):
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse_assignment(self):
        """
        Parse a variable assignment statement.
        """
        return _stmt.parse_assignment(self)

    def parse(self) -> Program:
        """
        Parse the full input into a program.
        """
        statements = []
        while self.curr_token.kind != TokenKind.EOF:
            statements.append(self.statement())
        logger.debug(
            "Parsed %d top-level statements from %s", len(statements), self.source_file
        )
        return Program(tuple(statements))
