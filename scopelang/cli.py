"""
scopelang command-line interpreter.

Workflow:
1. The source script is read from the file given on the command line.
2. The Lexer tokenizes the source code into tokens.
3. The Parser processes the tokens into an AST following the language grammar.
4. The Interpreter walks the AST, reporting every scope as it exits.
5. On success the final bindings of each scope are printed, innermost
   scopes first and the global scope last.

Any error aborts the run. It is printed to stderr as ``<Kind>: <message>``
and the process exits with status 1; nothing is printed to stdout.
"""

import argparse
import logging
import sys

from scopelang.exceptions import ScopeLangError
from scopelang.interpreter import Interpreter
from scopelang.lexer import tokenize
from scopelang.parser import Parser
from scopelang.report import ScopeCollector, format_reports

logger = logging.getLogger(__name__)

# Host frame limit while running a script; each script call uses about six frames.
RECURSION_LIMIT = 10000


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="scopelang",
        description=(
            "Run a scopelang script and print the final bindings of every scope "
            "in the order the scopes exited."
        ),
        allow_abbrev=False,
    )
    parser.add_argument("script", help="Path to a scopelang source file")
    return parser


def run_source(code: str, script_name: str = "<source>") -> ScopeCollector:
    """
    Lex, parse and run source code, returning the collected scope reports.
    """
    tokens = tokenize(code, script_name)
    ast = Parser(tokens, script_name).parse()
    collector = ScopeCollector()
    Interpreter(script_name, on_scope_exit=collector).run(ast)
    return collector


def run_script(script_name: str) -> int:
    """
    Run a scopelang script and print its scope reports.

    Returns:
        int: The process exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"IOError: Cannot read {script_name}: {e.strerror or e}", file=sys.stderr)
        return 1

    try:
        collector = run_source(code, script_name)
    except ScopeLangError as e:
        print(f"{e.kind}: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print(f"RecursionError: Maximum call depth exceeded in {script_name}", file=sys.stderr)
        return 1

    logger.debug("%d scopes reported", len(collector))
    print(format_reports(collector))
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.
    """
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    if sys.getrecursionlimit() < RECURSION_LIMIT:
        sys.setrecursionlimit(RECURSION_LIMIT)
    return run_script(args.script)


if __name__ == "__main__":
    sys.exit(main())
