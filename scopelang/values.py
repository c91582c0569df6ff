"""Runtime values.

A scopelang value is either a number, held as a plain Python ``int``, or a
:class:`FunctionValue`. Functions are ordinary values: a declaration binds
one under its name, and lookup treats it exactly like a variable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from scopelang.environment import Environment
    from scopelang.nodes import Block


class FunctionValue:
    """Runtime representation of a function value."""

    def __init__(self, name: str, params: tuple[str, ...], body: Block, closure: Environment):
        self.name = name
        self.params = params
        # Shared with the program's syntax tree, never copied.
        self.body = body
        # Scope the function was declared in; calls resolve names from here.
        self.closure = closure

    @property
    def arity(self) -> int:
        return len(self.params)

    def signature(self) -> str:
        return f"fn {self.name}({', '.join(self.params)})"

    def __repr__(self) -> str:
        return f"<{self.signature()}>"


Value = Union[int, FunctionValue]


def is_number(value) -> bool:
    """
    Return True for numeric values.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def type_name(value) -> str:
    """
    Name of a value's kind, for error messages.
    """
    if isinstance(value, FunctionValue):
        return "function"
    if is_number(value):
        return "number"
    return type(value).__name__


def render_value(value) -> str:
    """
    Render a value for scope reports: numbers by value, functions by signature.
    """
    if isinstance(value, FunctionValue):
        return value.signature()
    return str(value)
