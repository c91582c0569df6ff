"""Errors.

Every failure in a scopelang run is one of the exceptions below. Each carries
the source position (line and column) of the offending token or node when it
is known, and the script name it came from. The ``kind`` attribute is the
name reported by the command line driver.


File: exceptions.py
Version: 0.1.0
License: MIT
"""


class ScopeLangError(Exception):
    """
    Base class for lexing, parsing and runtime errors.
    """
    kind = "Error"

    def __init__(self, message, line=None, column=None, file=None):
        self.message = message
        self.line = line
        self.column = column
        self.file = file
        text = message
        if line is not None:
            text += f" on line {line}"
            if column is not None:
                text += f", column {column}"
        if file is not None:
            text += f" in {file}"
        super().__init__(text)


class LexError(ScopeLangError):
    """
    Error for characters the lexer does not recognise.
    """
    kind = "LexError"


class ParseError(ScopeLangError, SyntaxError):
    """
    Error for grammar violations.
    """
    kind = "ParseError"


class UndefinedNameError(ScopeLangError, NameError):
    """
    Error for unbound variables and functions.
    """
    kind = "NameError"

    def __init__(self, varname, line=None, column=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined name '{varname}'", line, column, file)


class ArityError(ScopeLangError):
    """
    Error for calls supplying the wrong number of arguments.
    """
    kind = "ArityError"

    def __init__(self, func_name, expected, given, line=None, column=None, file=None):
        self.func_name = func_name
        self.expected = expected
        self.given = given
        plural = "" if expected == 1 else "s"
        super().__init__(
            f"Function '{func_name}' expects {expected} argument{plural}, got {given}",
            line,
            column,
            file,
        )


class DivisionByZeroError(ScopeLangError, ZeroDivisionError):
    """
    Error for division or remainder by zero.
    """
    kind = "ArithmeticError"


class ValueTypeError(ScopeLangError, TypeError):
    """
    Error for operations applied to the wrong kind of value.
    """
    kind = "TypeError"
