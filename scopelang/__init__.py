"""scopelang.

A tree-walking interpreter for a small imperative language with integer
arithmetic, assignment, ``if``/``else``, ``while`` and recursive functions
with lexically scoped locals.


File: __init__.py
Version: 0.1.0
License: MIT
"""

import logging

from scopelang.environment import Environment
from scopelang.interpreter import Interpreter
from scopelang.lexer import Token, TokenKind, tokenize
from scopelang.parser import Parser, parse_source

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Environment",
    "Interpreter",
    "Parser",
    "Token",
    "TokenKind",
    "parse_source",
    "tokenize",
]
