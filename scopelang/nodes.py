"""Abstract syntax tree for scopelang.

The parser produces these nodes and the interpreter walks them. Nodes are
frozen dataclasses whose children are held in tuples, so a tree cannot be
modified once it has been parsed; only environment bindings change while a
program runs. Every node records the line and column of the token it starts
at so runtime errors can point back into the source.

Expression nodes:
    Literal, Variable, BinaryOp, UnaryOp, Call

Statement nodes:
    ExpressionStatement, Assignment, If, While, FunctionDeclaration, Return,
    Block

The root of a parse is a :class:`Program`.


File: nodes.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field

from scopelang.operations import Op, SYMBOLS


@dataclass(frozen=True)
class Node:
    """Base class for all syntax tree nodes."""
    line: int = field(default=0, kw_only=True, compare=False)
    column: int = field(default=0, kw_only=True, compare=False)


# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Literal(Node):
    value: int


@dataclass(frozen=True)
class Variable(Node):
    name: str


@dataclass(frozen=True)
class BinaryOp(Node):
    op: Op
    left: Expression
    right: Expression


@dataclass(frozen=True)
class UnaryOp(Node):
    op: Op
    operand: Expression


@dataclass(frozen=True)
class Call(Node):
    name: str
    args: tuple[Expression, ...] = ()


Expression = Literal | Variable | BinaryOp | UnaryOp | Call


# ----------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Block(Node):
    statements: tuple[Statement, ...] = ()


@dataclass(frozen=True)
class ExpressionStatement(Node):
    expr: Expression


@dataclass(frozen=True)
class Assignment(Node):
    name: str
    value: Expression


@dataclass(frozen=True)
class If(Node):
    condition: Expression
    then_block: Block
    else_block: Block | None = None


@dataclass(frozen=True)
class While(Node):
    condition: Expression
    body: Block


@dataclass(frozen=True)
class FunctionDeclaration(Node):
    name: str
    params: tuple[str, ...]
    body: Block


@dataclass(frozen=True)
class Return(Node):
    value: Expression


Statement = (
    ExpressionStatement | Assignment | If | While | FunctionDeclaration | Return | Block
)


@dataclass(frozen=True)
class Program:
    """Ordered top-level statements of a script."""
    statements: tuple[Statement, ...] = ()

    def __iter__(self):
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, index):
        return self.statements[index]


def format_expr(node: Expression) -> str:
    """
    Convert an expression back to readable source text for diagnostics.

    Binary and unary operations are fully parenthesized so the rendered
    text shows how the parser grouped them.
    """
    match node:
        case Literal(value=value):
            return str(value)
        case Variable(name=name):
            return name
        case BinaryOp(op=op, left=left, right=right):
            return f"({format_expr(left)} {SYMBOLS[op]} {format_expr(right)})"
        case UnaryOp(op=op, operand=operand):
            return f"{SYMBOLS[op]}{format_expr(operand)}"
        case Call(name=name, args=args):
            return f"{name}({', '.join(format_expr(arg) for arg in args)})"
        case _:
            name = type(node).__name__
            return f"<expr {name}>"
