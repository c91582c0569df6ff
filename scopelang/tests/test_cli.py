"""
Tests for the scopelang command-line interface.
"""
from pathlib import Path

import pytest

from scopelang.cli import main


def write_script(tmp_path, source: str):
    path = tmp_path / "script.sl"
    path.write_text(source, encoding="utf-8")
    return str(path)


def test_successful_run_prints_scopes_and_exits_zero(tmp_path, capsys):
    script = write_script(
        tmp_path,
        "fn fact(n) {\n"
        "    if n < 2 { 1 } else { n * fact(n - 1) }\n"
        "}\n"
        "result = fact(2)\n",
    )
    assert main([script]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out == [
        "[if] depth=2",
        "[call fact] depth=1",
        "  n = 1",
        "[else] depth=2",
        "[call fact] depth=1",
        "  n = 2",
        "[global] depth=0",
        "  fact = fn fact(n)",
        "  result = 2",
    ]


@pytest.mark.parametrize(
    "source, kind",
    [
        ("x = #", "LexError"),
        ("x = (1", "ParseError"),
        ("x = y", "NameError"),
        ("fn f(a) { a } f()", "ArityError"),
        ("x = 1 / 0", "ArithmeticError"),
        ("x = 1 x(2)", "TypeError"),
    ],
)
def test_errors_report_kind_and_exit_nonzero(tmp_path, capsys, source, kind):
    script = write_script(tmp_path, source)
    assert main([script]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(f"{kind}: ")
    assert "line 1" in captured.err
    assert script in captured.err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.sl")]) == 1
    assert capsys.readouterr().err.startswith("IOError: ")


def test_runaway_recursion_is_reported(tmp_path, capsys):
    script = write_script(tmp_path, "fn down(n) { down(n + 1) }\ndown(0)\n")
    assert main([script]) == 1
    assert capsys.readouterr().err.startswith("RecursionError: ")


def test_deep_recursion_runs_to_completion(tmp_path, capsys):
    """
    Recursion a thousand calls deep finishes and reports every call scope.
    """
    script = write_script(
        tmp_path,
        "fn sum(n) { if n == 0 { return 0 } return n + sum(n - 1) }\n"
        "r = sum(1000)\n",
    )
    assert main([script]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out.count("[call sum] depth=1") == 1001
    assert out[-1] == "  r = 500500"


def test_requires_script_argument(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


EXAMPLES_DIR = Path(__file__).resolve().parents[2] / "examples"


def test_factorial_example(capsys):
    assert main([str(EXAMPLES_DIR / "factorial.sl")]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out.count("[call fact] depth=1") == 5
    assert out[-3:] == ["[global] depth=0", "  fact = fn fact(n)", "  result = 120"]


def test_counter_example(capsys):
    assert main([str(EXAMPLES_DIR / "counter.sl")]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out == [
        "[while] depth=1",
        "  last = 5",
        "[global] depth=0",
        "  i = 5",
        "  total = 15",
    ]
