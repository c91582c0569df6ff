"""Statement parsing utilities for scopelang.

These functions operate on a `scopelang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
conditionals, loops, and function declarations.

Statements need no terminator. Whitespace is insignificant and every
expression stops at the first token that cannot continue it, so the next
statement simply begins where the previous one ended.


File: statements.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from scopelang.lexer import TokenKind
from scopelang.nodes import (
    Assignment,
    Block,
    ExpressionStatement,
    FunctionDeclaration,
    If,
    Return,
    While,
)

if TYPE_CHECKING:
    from scopelang.parser import Parser


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        Block: The ordered statements of the block.
    """
    open_tok = parser.curr_token
    if not parser.check(TokenKind.PUNCTUATION, '{'):
        raise parser.error(
            f"Expected '{{' to open a block but got {parser.describe(open_tok)}"
        )
    parser.advance()
    statements = []
    while not parser.check(TokenKind.PUNCTUATION, '}'):
        if parser.curr_token.kind == TokenKind.EOF:
            raise parser.error(
                f"Expected '}}' to close the block opened on line {open_tok.line}, "
                f"column {open_tok.column} but reached end of input"
            )
        statements.append(parser.statement())
    parser.advance()
    return Block(tuple(statements), line=open_tok.line, column=open_tok.column)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Syntax:
        <statement>

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if tok.kind == TokenKind.KEYWORD:
        if tok.value == 'if':
            return parser.parse_if()
        elif tok.value == 'while':
            return parser.parse_while()
        elif tok.value == 'fn':
            return parser.parse_func_def()
        elif tok.value == 'return':
            return parser.parse_return()
        raise parser.error(f"Unexpected keyword '{tok.value}'")
    elif tok.kind == TokenKind.IDENTIFIER:
        nxt = parser.peek()
        if nxt.kind == TokenKind.OPERATOR and nxt.value == '=':
            return parser.parse_assignment()
    elif tok.kind == TokenKind.PUNCTUATION:
        if tok.value == '{':
            return parser.block()
        if tok.value == ')':
            raise parser.error("Unbalanced parentheses: unexpected ')'")
        if tok.value in ('}', ','):
            raise parser.error(f"Unexpected '{tok.value}'")
    elif tok.kind == TokenKind.OPERATOR and tok.value == '=':
        raise parser.error("Unexpected '=': only a name can be assigned to")

    expr_node = parser.expr()
    return ExpressionStatement(expr_node, line=tok.line, column=tok.column)


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional 'if' statement with an optional else block.

    Syntax:
        if <condition> { <block> }
        if <condition> { <block> } else { <block> }
        if <condition> { <block> } else if <condition> { <block> } ...

    Args:
        parser: The parser instance.

    Returns:
        If: The conditional node. An ``else if`` chain becomes an else
        block holding a single nested If.
    """
    tok = parser.eat(TokenKind.KEYWORD, 'if')
    condition = parser.expr()
    then_block = parser.block()

    else_block = None
    if parser.check(TokenKind.KEYWORD, 'else'):
        parser.advance()
        if parser.check(TokenKind.KEYWORD, 'if'):
            nested_tok = parser.curr_token
            nested = parser.parse_if()
            else_block = Block((nested,), line=nested_tok.line, column=nested_tok.column)
        else:
            else_block = parser.block()

    return If(condition, then_block, else_block, line=tok.line, column=tok.column)


def parse_while(parser: 'Parser') -> While:
    """
    Parse a 'while' statement.

    Syntax:
        while <condition> { <block> }

    Args:
        parser: The parser instance.

    Returns:
        While: The loop node.
    """
    tok = parser.eat(TokenKind.KEYWORD, 'while')
    condition = parser.expr()
    body = parser.block()
    return While(condition, body, line=tok.line, column=tok.column)


def _parse_param(parser: 'Parser', params: list) -> None:
    """Consume one parameter name and append it to ``params``."""
    tok = parser.curr_token
    if tok.kind != TokenKind.IDENTIFIER:
        raise parser.error(
            f"Expected parameter name but got {parser.describe(tok)}"
        )
    if tok.value in params:
        raise parser.error(f"Duplicate parameter '{tok.value}'")
    parser.advance()
    params.append(tok.value)


def parse_func_def(parser: 'Parser') -> FunctionDeclaration:
    """
    Parse a function declaration.

    Syntax:
        fn <name>(<params>) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        FunctionDeclaration: The declaration node.
    """
    start_tok = parser.eat(TokenKind.KEYWORD, 'fn')
    name_tok = parser.curr_token
    if name_tok.kind != TokenKind.IDENTIFIER:
        raise parser.error(
            f"Expected function name after 'fn' but got {parser.describe(name_tok)}"
        )
    parser.advance()

    parser.eat(TokenKind.PUNCTUATION, '(')
    params: list[str] = []
    if not parser.check(TokenKind.PUNCTUATION, ')'):
        _parse_param(parser, params)
        while parser.check(TokenKind.PUNCTUATION, ','):
            parser.advance()
            _parse_param(parser, params)
    if not parser.check(TokenKind.PUNCTUATION, ')'):
        raise parser.error(
            f"Expected ',' or ')' in parameter list but got {parser.describe(parser.curr_token)}"
        )
    parser.advance()

    parser.function_depth += 1
    try:
        body = parser.block()
    finally:
        parser.function_depth -= 1
    return FunctionDeclaration(
        name_tok.value, tuple(params), body, line=start_tok.line, column=start_tok.column
    )


def parse_return(parser: 'Parser') -> Return:
    """
    Parse a 'return' statement.

    Syntax:
        return <expression>

    Args:
        parser: The parser instance.

    Returns:
        Return: The return node.
    """
    tok = parser.curr_token
    if parser.function_depth == 0:
        raise parser.error("'return' outside of a function body")
    parser.advance()
    expr_node = parser.expr()
    return Return(expr_node, line=tok.line, column=tok.column)


def parse_assignment(parser: 'Parser') -> Assignment:
    """
    Parse assignment to a name.

    Syntax:
        <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        Assignment: The assignment node.
    """
    id_tok = parser.eat(TokenKind.IDENTIFIER)
    parser.eat(TokenKind.OPERATOR, '=')
    expr_node = parser.expr()
    return Assignment(id_tok.value, expr_node, line=id_tok.line, column=id_tok.column)
