"""
Expression parsing for scopelang.

Expressions are parsed with Dijkstra's Shunting Yard algorithm. The parser
keeps two stacks: finished operand nodes, and operators still waiting for
their right-hand side (with open parentheses as markers). Before an
incoming binary operator is pushed, every stacked operator that binds at
least as tightly is reduced into a node, which gives left-associativity for
equal precedence. Prefix operators are pushed without reducing and bind
tightest of all.

Function calls are parsed as single operands, so ``f(x) * 2`` groups the
call before any binary operator. Each argument is a nested expression.

The parser alternates between expecting an operand and expecting an
operator. The expression ends at the first token in operator position that
cannot continue it; that token is left for the caller.
"""

from typing import TYPE_CHECKING

from scopelang.lexer import Token, TokenKind
from scopelang.nodes import BinaryOp, Call, Literal, UnaryOp, Variable
from scopelang.operations import BINARY_OPS, PRECEDENCE, UNARY_OPS, Op, is_unary

if TYPE_CHECKING:
    from scopelang.parser import Parser


class _Pending:
    """An operator on the stack, with the token it came from."""

    def __init__(self, op: Op | None, tok: Token):
        # op is None for an open parenthesis marker
        self.op = op
        self.tok = tok

    @property
    def is_paren(self) -> bool:
        return self.op is None

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.op]


def _reduce(parser: 'Parser', operands: list, pending: _Pending) -> None:
    """Pop the operands ``pending`` needs and push the resulting node."""
    tok = pending.tok
    needed = 1 if is_unary(pending.op) else 2
    if len(operands) < needed:
        raise parser.error(f"Missing operand for '{tok.value}'", tok)
    if needed == 1:
        operand = operands.pop()
        operands.append(UnaryOp(pending.op, operand, line=tok.line, column=tok.column))
    else:
        right = operands.pop()
        left = operands.pop()
        operands.append(
            BinaryOp(pending.op, left, right, line=tok.line, column=tok.column)
        )


def _close_paren(parser: 'Parser', operands: list, operators: list) -> None:
    """Reduce back to the nearest open parenthesis and drop the marker."""
    while not operators[-1].is_paren:
        _reduce(parser, operands, operators.pop())
    operators.pop()


def _operand_error(parser: 'Parser', operators: list):
    """Build the error for a token that cannot start an operand."""
    tok = parser.curr_token
    if tok.kind == TokenKind.EOF:
        return parser.error("Expected expression but reached end of input")
    if operators and not operators[-1].is_paren:
        return parser.error(
            f"Expected expression after '{operators[-1].tok.value}' "
            f"but got {parser.describe(tok)}"
        )
    return parser.error(f"Expected expression but got {parser.describe(tok)}")


def parse_expression(parser: 'Parser'):
    """
    Parse an expression starting at the current token.

    Returns:
        The root expression node. The parser is left on the first token
        after the expression.

    Raises:
        ParseError: On unbalanced parentheses, a trailing operator, an
            unexpected token in operand position or a malformed call.
    """
    operands: list = []
    operators: list[_Pending] = []
    open_parens = 0
    expect_operand = True

    while True:
        tok = parser.curr_token

        if expect_operand:
            if tok.kind == TokenKind.INTEGER:
                parser.advance()
                operands.append(Literal(int(tok.value), line=tok.line, column=tok.column))
                expect_operand = False
            elif tok.kind == TokenKind.IDENTIFIER:
                parser.advance()
                if parser.check(TokenKind.PUNCTUATION, '('):
                    args = parser.call_args()
                    operands.append(Call(tok.value, args, line=tok.line, column=tok.column))
                else:
                    operands.append(Variable(tok.value, line=tok.line, column=tok.column))
                expect_operand = False
            elif tok.kind == TokenKind.PUNCTUATION and tok.value == '(':
                parser.advance()
                operators.append(_Pending(None, tok))
                open_parens += 1
            elif tok.kind == TokenKind.OPERATOR and tok.value in UNARY_OPS:
                parser.advance()
                operators.append(_Pending(UNARY_OPS[tok.value], tok))
            else:
                raise _operand_error(parser, operators)
            continue

        if tok.kind == TokenKind.OPERATOR and tok.value in BINARY_OPS:
            incoming = _Pending(BINARY_OPS[tok.value], tok)
            while (
                operators
                and not operators[-1].is_paren
                and operators[-1].precedence >= incoming.precedence
            ):
                _reduce(parser, operands, operators.pop())
            operators.append(incoming)
            parser.advance()
            expect_operand = True
            continue

        if tok.kind == TokenKind.PUNCTUATION and tok.value == ')' and open_parens:
            _close_paren(parser, operands, operators)
            open_parens -= 1
            parser.advance()
            continue

        break

    while operators:
        top = operators.pop()
        if top.is_paren:
            raise parser.error(
                f"Unbalanced parentheses: '(' on line {top.tok.line}, "
                f"column {top.tok.column} is never closed, "
                f"found {parser.describe(parser.curr_token)}"
            )
        _reduce(parser, operands, top)

    if len(operands) != 1:
        raise parser.error("Malformed expression")
    return operands[0]


def parse_call_args(parser: 'Parser') -> tuple:
    """
    Parse a call argument list.

    Syntax:
        ( [<expression> {, <expression>}] )

    Returns:
        tuple: The argument expression nodes.
    """
    open_tok = parser.eat(TokenKind.PUNCTUATION, '(')
    if parser.check(TokenKind.PUNCTUATION, ')'):
        parser.advance()
        return ()

    args = []
    while True:
        args.append(parser.expr())
        if parser.check(TokenKind.PUNCTUATION, ','):
            parser.advance()
            continue
        if parser.check(TokenKind.PUNCTUATION, ')'):
            parser.advance()
            return tuple(args)
        if parser.curr_token.kind == TokenKind.EOF:
            raise parser.error(
                "Unterminated argument list: expected ')' but reached end of input",
                open_tok,
            )
        raise parser.error(
            f"Expected ',' or ')' in argument list but got {parser.describe(parser.curr_token)}"
        )
