"""Environment.

An :class:`Environment` is one scope: a mapping of names to values plus an
optional reference to the enclosing scope. Chaining environments through
their parents gives lexical lookup and shadowing:

- ``lookup`` walks outward until some scope binds the name.
- ``bind`` always writes the innermost scope; it introduces parameters and
  first assignments.
- ``assign`` mutates the nearest scope that already owns the name and only
  falls back to ``bind`` when nobody does, so assignment never creates a
  binding in an enclosing scope.

Parent links only point outward, so the live scopes always form a tree.
A new child is created on every block or call entry and dropped on exit,
after its bindings have been reported.


File: environment.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from scopelang.exceptions import UndefinedNameError
from scopelang.values import Value, render_value


class Environment:
    """A single scope in the scope chain."""

    def __init__(self, parent: Environment | None = None, label: str = "global"):
        self.bindings: dict[str, Value] = {}
        self.parent = parent
        self.label = label
        self.depth = 0 if parent is None else parent.depth + 1

    def child_scope(self, label: str) -> Environment:
        """
        Create a new empty scope enclosed by this one.
        """
        return Environment(self, label)

    def resolve(self, name: str) -> Environment | None:
        """
        Return the nearest scope that binds ``name``, or None.
        """
        env: Environment | None = self
        while env is not None:
            if name in env.bindings:
                return env
            env = env.parent
        return None

    def lookup(self, name: str, line=None, column=None, file=None) -> Value:
        """
        Return the value bound to ``name`` in this scope or an enclosing one.

        Raises:
            UndefinedNameError: If no scope in the chain binds the name.
        """
        owner = self.resolve(name)
        if owner is None:
            raise UndefinedNameError(name, line, column, file)
        return owner.bindings[name]

    def bind(self, name: str, value: Value) -> None:
        """
        Create or overwrite ``name`` in this scope only.
        """
        self.bindings[name] = value

    def assign(self, name: str, value: Value) -> None:
        """
        Update ``name`` where it is already bound, else bind it here.
        """
        owner = self.resolve(name) or self
        owner.bindings[name] = value

    def snapshot(self) -> dict[str, Value]:
        """
        Return a copy of this scope's bindings.
        """
        return dict(self.bindings)

    def rendered(self) -> dict[str, str]:
        """
        Return this scope's bindings rendered as text, in binding order.
        """
        return {name: render_value(value) for name, value in self.bindings.items()}

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def __repr__(self) -> str:
        return f"Environment({self.label!r}, depth={self.depth}, names={list(self.bindings)})"
