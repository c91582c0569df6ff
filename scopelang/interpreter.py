"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
integer arithmetic, variables, function declarations and calls, conditionals and loops.

1. Execution Model
The interpreter evaluates the abstract syntax tree top-down and recursively. Statements are
executed via `execute()`, which returns a `Completion`; expressions are evaluated using
`evaluate()`, which returns a value. `run()` executes a whole program in a fresh global scope.

2. Environment
Names live in a chain of `Environment` scopes. A call gets a new scope whose parent is the
scope the function was declared in (lexical scoping). Each `if`/`else` branch and each nested
block runs in a new child scope, and each `while` statement runs every iteration of its body
in one shared child scope, so counters and accumulators survive between iterations.

3. Expression Evaluation
Literals, variables, binary and unary operations and calls are evaluated recursively. Only
numbers take part in arithmetic; comparisons, `!`, `&&` and `||` produce 1 or 0, and any
nonzero number counts as true.

4. Control Flow
`return` does not unwind the host stack with an exception. Statement execution hands back a
`Completion`, and a returning completion is passed up through blocks and loops until the
enclosing call takes its value.

5. Scope Reporting
When a scope exits normally it is handed to the `on_scope_exit` callback before being dropped,
innermost scopes first and the global scope last. Scopes abandoned by an error are not reported.

6. Error Handling
Runtime errors such as undefined names, arity mismatches, division by zero or operations on
the wrong kind of value are surfaced as typed exceptions with line, column and file context.


File: interpreter.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

from scopelang.environment import Environment
from scopelang.exceptions import (
    ArityError,
    DivisionByZeroError,
    ValueTypeError,
)
from scopelang.nodes import (
    Assignment,
    BinaryOp,
    Block,
    Call,
    ExpressionStatement,
    FunctionDeclaration,
    If,
    Literal,
    Program,
    Return,
    UnaryOp,
    Variable,
    While,
    format_expr,
)
from scopelang.operations import Op, SYMBOLS
from scopelang.values import FunctionValue, Value, is_number, type_name

logger = logging.getLogger(__name__)

# Result of a call whose body produced no value.
DEFAULT_VALUE = 0


@dataclass(frozen=True)
class Completion:
    """
    Outcome of executing a statement.

    ``value`` is the statement's value (None when it has none). When
    ``returning`` is set, a `return` ran and the enclosing blocks must stop.
    """
    value: Value | None = None
    returning: bool = False


NORMAL = Completion()


def _trunc_div(lhs: int, rhs: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


class Interpreter:
    """Tree-walk interpreter for scopelang."""

    def __init__(
        self,
        file: str = "<source>",
        on_scope_exit: Callable[[Environment], None] | None = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name used in error messages.
            on_scope_exit (callable): Called with each scope as it exits.
        """
        self.file = file
        self.on_scope_exit = on_scope_exit

    # ------------------------------------------------------------------
    # Scopes
    # ------------------------------------------------------------------

    def _report(self, env: Environment) -> None:
        logger.debug("Exiting scope %r", env)
        if self.on_scope_exit is not None:
            self.on_scope_exit(env)

    @contextmanager
    def scope(self, parent: Environment, label: str) -> Iterator[Environment]:
        """
        Enter a child scope of ``parent``; report it when the block exits normally.
        """
        env = parent.child_scope(label)
        logger.debug("Entering scope %r", env)
        yield env
        self._report(env)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _type_error(self, message: str, node) -> ValueTypeError:
        return ValueTypeError(message, node.line, node.column, self.file)

    def _require_number(self, value, node, what: str) -> int:
        if not is_number(value):
            raise self._type_error(
                f"{what} requires a number, got {type_name(value)}", node
            )
        return value

    def truthy(self, value, node) -> bool:
        """
        Interpret a condition value: any nonzero number is true.
        """
        return self._require_number(value, node, "Condition") != 0

    def evaluate(self, node, env: Environment) -> Value:
        """
        Recursively evaluate an expression node and return its computed value.

        Statement nodes other than `Return` are accepted too; their value is
        returned (or the default value when they produce none). A `Return`
        only makes sense inside `execute`, which carries its returning flag.

        Raises:
            UndefinedNameError: If a name is referenced that is not bound.
            ArityError: If a call supplies the wrong number of arguments.
            DivisionByZeroError: If a division or remainder has a zero divisor.
            ValueTypeError: If an operation is applied to the wrong kind of value.
        """
        match node:
            case Literal(value=value):
                return value

            case Variable(name=name):
                return env.lookup(name, node.line, node.column, self.file)

            case UnaryOp(op=op, operand=operand_node):
                operand = self.evaluate(operand_node, env)
                symbol = SYMBOLS[op]
                operand = self._require_number(operand, node, f"Unary '{symbol}'")
                match op:
                    case Op.NEG:
                        return -operand
                    case Op.NOT:
                        return 1 if operand == 0 else 0
                raise RuntimeError(f"Unknown unary operator '{op}'")

            case BinaryOp():
                return self._eval_binary(node, env)

            case Call():
                return self.call(node, env)

            case Return():
                raise RuntimeError(
                    f"'return' on line {node.line} must be executed as a statement, "
                    f"not evaluated"
                )

        completion = self.execute(node, env)
        return DEFAULT_VALUE if completion.value is None else completion.value

    def _eval_binary(self, node: BinaryOp, env: Environment) -> int:
        op = node.op
        symbol = SYMBOLS[op]
        lhs = self._require_number(
            self.evaluate(node.left, env), node, f"Operator '{symbol}'"
        )

        # Logical operators short-circuit
        if op == Op.AND:
            if lhs == 0:
                return 0
            rhs = self._require_number(
                self.evaluate(node.right, env), node, f"Operator '{symbol}'"
            )
            return 1 if rhs != 0 else 0
        if op == Op.OR:
            if lhs != 0:
                return 1
            rhs = self._require_number(
                self.evaluate(node.right, env), node, f"Operator '{symbol}'"
            )
            return 1 if rhs != 0 else 0

        rhs = self._require_number(
            self.evaluate(node.right, env), node, f"Operator '{symbol}'"
        )
        match op:
            # Arithmetic
            case Op.ADD:
                return lhs + rhs
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV | Op.MOD:
                if rhs == 0:
                    verb = "Division" if op == Op.DIV else "Remainder"
                    raise DivisionByZeroError(
                        f"{verb} by zero in {format_expr(node)}",
                        node.line,
                        node.column,
                        self.file,
                    )
                quotient = _trunc_div(lhs, rhs)
                return quotient if op == Op.DIV else lhs - rhs * quotient
            # Comparison
            case Op.EQ:
                return int(lhs == rhs)
            case Op.NE:
                return int(lhs != rhs)
            case Op.GT:
                return int(lhs > rhs)
            case Op.LT:
                return int(lhs < rhs)
            case Op.GE:
                return int(lhs >= rhs)
            case Op.LE:
                return int(lhs <= rhs)
        raise RuntimeError(f"Unknown binary operator '{op}'")

    def call(self, node: Call, env: Environment) -> Value:
        """
        Call a user-defined function.

        The callee is looked up like any variable. Arguments are evaluated
        left to right in the caller's scope and bound to the parameters in a
        new scope enclosed by the function's declaring scope.
        """
        func = env.lookup(node.name, node.line, node.column, self.file)
        if not isinstance(func, FunctionValue):
            raise self._type_error(
                f"Attempted to call non-function '{node.name}' ({type_name(func)})", node
            )
        if len(node.args) != func.arity:
            raise ArityError(
                func.name, func.arity, len(node.args), node.line, node.column, self.file
            )

        args = [self.evaluate(arg, env) for arg in node.args]
        logger.debug("Calling %s with %s", func.signature(), args)

        with self.scope(func.closure, f"call {func.name}") as local:
            for param, arg in zip(func.params, args):
                local.bind(param, arg)
            completion = self.execute_block(func.body, local)

        if completion.value is None:
            return DEFAULT_VALUE
        return completion.value

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute_block(self, block: Block, env: Environment) -> Completion:
        """
        Execute a block's statements in order in ``env`` itself.

        Callers that want isolation pass a fresh child scope. The block's
        value is the value of its last statement; a returning completion
        stops the block immediately.
        """
        completion = NORMAL
        for stmt in block.statements:
            completion = self.execute(stmt, env)
            if completion.returning:
                return completion
        return completion

    def execute(self, stmt, env: Environment) -> Completion:
        """
        Execute a single statement.

        Raises:
            RuntimeError: For unknown statement types.
        """
        match stmt:
            case ExpressionStatement(expr=expr_node):
                return Completion(self.evaluate(expr_node, env))

            case Assignment(name=name, value=expr_node):
                value = self.evaluate(expr_node, env)
                env.assign(name, value)
                return Completion(value)

            case If(condition=cond_node, then_block=then_block, else_block=else_block):
                if self.truthy(self.evaluate(cond_node, env), cond_node):
                    with self.scope(env, "if") as branch:
                        return self.execute_block(then_block, branch)
                if else_block is not None:
                    with self.scope(env, "else") as branch:
                        return self.execute_block(else_block, branch)
                return NORMAL

            case While(condition=cond_node, body=body):
                return self._execute_while(cond_node, body, env)

            case FunctionDeclaration(name=name, params=params, body=body):
                env.bind(name, FunctionValue(name, params, body, env))
                return NORMAL

            case Return(value=expr_node):
                return Completion(self.evaluate(expr_node, env), returning=True)

            case Block():
                with self.scope(env, "block") as inner:
                    return self.execute_block(stmt, inner)

        raise RuntimeError(
            f"Unknown statement type: {type(stmt).__name__} "
            f"on line {getattr(stmt, 'line', '?')} in {self.file}"
        )

    def _execute_while(self, cond_node, body: Block, env: Environment) -> Completion:
        # One scope serves every iteration; it is created on first entry.
        loop_env: Environment | None = None
        completion = NORMAL
        while self.truthy(self.evaluate(cond_node, env), cond_node):
            if loop_env is None:
                loop_env = env.child_scope("while")
                logger.debug("Entering scope %r", loop_env)
            completion = self.execute_block(body, loop_env)
            if completion.returning:
                break
        if loop_env is not None:
            self._report(loop_env)
        return completion if completion.returning else NORMAL

    # ------------------------------------------------------------------
    # Programs
    # ------------------------------------------------------------------

    def run(self, program: Program, env: Environment | None = None) -> Environment:
        """
        Execute a program and return its global scope.

        The global scope is reported after every inner scope has exited.
        """
        env = env if env is not None else Environment()
        for stmt in program.statements:
            self.execute(stmt, env)
        self._report(env)
        return env
