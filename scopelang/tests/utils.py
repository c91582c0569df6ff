"""
Utility functions shared across scopelang tests.
"""
from pathlib import Path
import sys

from scopelang.environment import Environment
from scopelang.interpreter import Interpreter
from scopelang.lexer import tokenize
from scopelang.parser import Parser
from scopelang.report import ScopeCollector

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Parse source code and return the program AST.
    """
    tokens = tokenize(source, "<test>")
    parser = Parser(tokens, "<test>")
    return parser.parse()


def parse_expr(source: str):
    """
    Parse a single expression and return its node.
    """
    parser = Parser(tokenize(source, "<test>"), "<test>")
    node = parser.expr()
    assert parser.curr_token.kind.value == "EOF", f"unparsed input at {parser.curr_token}"
    return node


def eval_expr(source: str, env: Environment | None = None):
    """
    Evaluate a single expression in ``env`` (a fresh global scope by default).
    """
    return Interpreter("<test>").evaluate(parse_expr(source), env or Environment())


def run_source(source: str) -> tuple[Environment, ScopeCollector]:
    """
    Run source code and return the global scope and the scope-exit reports.
    """
    collector = ScopeCollector()
    interpreter = Interpreter("<test>", on_scope_exit=collector)
    env = interpreter.run(parse_source(source))
    return env, collector
