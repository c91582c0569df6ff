"""Scope-exit reporting.

The interpreter calls back into a :class:`ScopeCollector` every time a scope
exits normally, innermost scopes first, and finally once for the global
scope. The collector freezes each scope's bindings into a
:class:`ScopeReport` at that moment so later mutation (of an enclosing
scope, say) cannot change what was recorded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from scopelang.environment import Environment


@dataclass(frozen=True)
class ScopeReport:
    """Final state of one scope at the moment it exited."""
    label: str
    depth: int
    bindings: tuple[tuple[str, str], ...]

    @classmethod
    def from_environment(cls, env: Environment) -> ScopeReport:
        return cls(env.label, env.depth, tuple(env.rendered().items()))

    def format(self) -> str:
        lines = [f"[{self.label}] depth={self.depth}"]
        lines.extend(f"  {name} = {value}" for name, value in self.bindings)
        return "\n".join(lines)


class ScopeCollector:
    """Callable that records a report for every exited scope, in exit order."""

    def __init__(self) -> None:
        self.reports: list[ScopeReport] = []

    def __call__(self, env: Environment) -> None:
        self.reports.append(ScopeReport.from_environment(env))

    def __len__(self) -> int:
        return len(self.reports)

    def __iter__(self):
        return iter(self.reports)

    def labels(self) -> list[str]:
        return [report.label for report in self.reports]


def format_reports(reports: Iterable[ScopeReport]) -> str:
    """
    Render reports in the order given, one block per scope.
    """
    return "\n".join(report.format() for report in reports)
