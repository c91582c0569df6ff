"""Parser package for scopelang.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class is exposed at the
package level for convenience, along with :func:`parse_source` which runs
the lexer and parser in one step.


File: __init__.py
Version: 0.1.0
License: MIT
"""

from scopelang.lexer import tokenize
from scopelang.nodes import Program

from .parser import Parser


def parse_source(code: str, file: str = "<source>") -> Program:
    """
    Tokenize and parse source code into a program.
    """
    return Parser(tokenize(code, file), file).parse()


__all__ = ["Parser", "parse_source"]
