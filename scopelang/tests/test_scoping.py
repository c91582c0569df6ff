"""
Tests for scoping rules in scopelang.
"""
import pytest

from scopelang.environment import Environment
from scopelang.exceptions import UndefinedNameError

from scopelang.tests.utils import run_source


def test_environment_lookup_walks_parents():
    root = Environment()
    root.bind("x", 1)
    child = root.child_scope("block")
    grandchild = child.child_scope("block")
    assert grandchild.lookup("x") == 1
    assert grandchild.depth == 2
    assert grandchild.resolve("x") is root


def test_environment_lookup_unbound_raises():
    with pytest.raises(UndefinedNameError):
        Environment().child_scope("block").lookup("missing")


def test_environment_assign_mutates_owner():
    root = Environment()
    root.bind("x", 1)
    child = root.child_scope("block")
    child.assign("x", 2)
    assert root.bindings == {"x": 2}
    assert child.bindings == {}


def test_environment_assign_unowned_binds_innermost():
    root = Environment()
    child = root.child_scope("block")
    child.assign("y", 3)
    assert child.bindings == {"y": 3}
    assert "y" not in root.bindings


def test_environment_bind_shadows():
    root = Environment()
    root.bind("x", 1)
    child = root.child_scope("call f")
    child.bind("x", 9)
    assert child.lookup("x") == 9
    assert root.lookup("x") == 1


def test_snapshot_is_a_copy():
    env = Environment()
    env.bind("a", 1)
    snap = env.snapshot()
    snap["a"] = 100
    assert env.lookup("a") == 1


def test_assignment_then_lookup():
    env, _ = run_source("x = 5")
    assert env.lookup("x") == 5


def test_parameter_shadows_outer_variable():
    env, _ = run_source(
        "x = 10\n"
        "fn f(x) { x = x + 1 inner = x }\n"
        "r = f(1)\n"
    )
    assert env.lookup("x") == 10
    assert env.lookup("r") == 2


def test_function_locals_do_not_leak():
    env, _ = run_source(
        "fn f() { local = 3 }\n"
        "f()\n"
    )
    assert "local" not in env


def test_function_assigns_existing_global():
    env, _ = run_source(
        "counter = 0\n"
        "fn bump() { counter = counter + 1 }\n"
        "bump() bump() bump()\n"
    )
    assert env.lookup("counter") == 3


def test_if_branch_locals_do_not_leak():
    env, _ = run_source(
        "x = 1\n"
        "if x { y = 2 x = 5 } else { z = 3 }\n"
    )
    assert env.lookup("x") == 5
    assert "y" not in env
    assert "z" not in env


def test_nested_block_has_its_own_scope():
    env, _ = run_source("a = 1 { a = 2 b = 3 }")
    assert env.lookup("a") == 2
    assert "b" not in env


def test_lexical_scoping_for_calls():
    """
    A function body resolves free names in its declaring scope, not the caller's.
    """
    env, _ = run_source(
        "x = 1\n"
        "fn read() { x }\n"
        "fn caller() { x = 2 }\n"
        "fn shadowing_caller(x) { read() }\n"
        "r = shadowing_caller(99)\n"
    )
    assert env.lookup("r") == 1


def test_functions_declared_in_functions_see_enclosing_locals():
    env, _ = run_source(
        "fn outer(n) {\n"
        "    fn inner(k) { n + k }\n"
        "    inner(10)\n"
        "}\n"
        "r = outer(5)\n"
    )
    assert env.lookup("r") == 15
    assert "inner" not in env


def test_unbound_variable_raises_name_error():
    with pytest.raises(UndefinedNameError) as excinfo:
        run_source("x = 1\ny = x + missing\n")
    err = excinfo.value
    assert err.varname == "missing"
    assert err.kind == "NameError"
    assert (err.line, err.column) == (2, 9)
    assert isinstance(err, NameError)


def test_unbound_never_defaults_to_zero():
    with pytest.raises(UndefinedNameError):
        run_source("if 1 { y = 1 } z = y")
