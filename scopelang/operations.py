"""Shared definitions for AST operation identifiers.

This module centralizes the operator constants used by the parser and
interpreter to label nodes in the abstract syntax tree, together with the
precedence table the expression parser reduces by.  Keeping them in one
place prevents the two components from drifting apart when new operations
are added or existing ones are renamed.
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"

    # Boolean
    AND = "and"
    OR = "or"

    # Unary
    NEG = "neg"
    NOT = "not"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Operator text in binary position.
BINARY_OPS: dict[str, Op] = {
    '*': Op.MUL,
    '/': Op.DIV,
    '%': Op.MOD,
    '+': Op.ADD,
    '-': Op.SUB,
    '==': Op.EQ,
    '!=': Op.NE,
    '<': Op.LT,
    '>': Op.GT,
    '<=': Op.LE,
    '>=': Op.GE,
    '&&': Op.AND,
    '||': Op.OR,
}

# Operator text in operand (prefix) position.
UNARY_OPS: dict[str, Op] = {
    '-': Op.NEG,
    '!': Op.NOT,
}

UNARY_PRECEDENCE = 6

PRECEDENCE: dict[Op, int] = {
    Op.NEG: UNARY_PRECEDENCE,
    Op.NOT: UNARY_PRECEDENCE,
    Op.MUL: 5,
    Op.DIV: 5,
    Op.MOD: 5,
    Op.ADD: 4,
    Op.SUB: 4,
    Op.EQ: 3,
    Op.NE: 3,
    Op.LT: 3,
    Op.GT: 3,
    Op.LE: 3,
    Op.GE: 3,
    Op.AND: 2,
    Op.OR: 1,
}

# Source text for each operation, used when rendering nodes.
SYMBOLS: dict[Op, str] = {
    **{op: text for text, op in BINARY_OPS.items()},
    **{op: text for text, op in UNARY_OPS.items()},
}


def is_unary(op: Op) -> bool:
    """
    Return True for prefix operators.
    """
    return op in (Op.NEG, Op.NOT)


__all__ = ["Op", "BINARY_OPS", "UNARY_OPS", "PRECEDENCE", "SYMBOLS", "is_unary"]
