"""
Org Chart — Core Domain Types

One node per employee. Nodes hold ids, never references to other
nodes: the registry owns every Employee and resolves ids on demand.

A node keeps its own links (manager id, ordered report ids) but does
NOT keep the other side of a link in sync. That is the registry's job.

────────────────────────────────────────────────
DOMAIN GLOSSARY
────────────────────────────────────────────────

Manager link:
    Upward reference to the employee this one reports to.
    None for a root.

Report:
    Downward reference to a direct subordinate. Order is significant.

Root:
    An employee whose manager link is None.

────────────────────────────────────────────────
"""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Iterator, Optional, TextIO, Tuple

from .constants import INDENT_STEP


EmployeeId = Hashable

Resolver = Callable[[EmployeeId], "Employee"]


class Employee:
    """A single tracked employee: identity, name, manager link, reports."""

    def __init__(
        self,
        employee_id: EmployeeId,
        name: str,
        manager_id: Optional[EmployeeId] = None,
    ) -> None:
        self._id = employee_id
        self._name = name
        self._manager_id = manager_id
        self._report_ids: list = []

    # -- Identity -----------------------------------------------------------

    @property
    def id(self) -> EmployeeId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        """Display form used by every rendering: ``name [id]``."""
        return f"{self._name} [{self._id}]"

    # -- Manager link -------------------------------------------------------

    @property
    def manager_id(self) -> Optional[EmployeeId]:
        return self._manager_id

    @manager_id.setter
    def manager_id(self, new_manager_id: Optional[EmployeeId]) -> None:
        self._manager_id = new_manager_id

    @property
    def is_root(self) -> bool:
        return self._manager_id is None

    # -- Reports ------------------------------------------------------------

    @property
    def report_ids(self) -> Tuple[EmployeeId, ...]:
        return tuple(self._report_ids)

    def add_report(self, report_id: EmployeeId) -> None:
        """Append to the end of the report list. No uniqueness check."""
        self._report_ids.append(report_id)

    def add_reports(self, report_ids: Iterable[EmployeeId]) -> None:
        self._report_ids.extend(report_ids)

    def remove_report(self, report_id: EmployeeId) -> None:
        """Drop the first matching entry. Missing ids are a no-op."""
        if report_id in self._report_ids:
            self._report_ids.remove(report_id)

    # -- Rendering ----------------------------------------------------------

    def lines(self, resolve: Resolver, indent: int = 0) -> Iterator[str]:
        """
        Pre-order, depth-first rendering of this employee's subtree.

        One line per employee, ``indent`` spaces before the label, each
        level down adding INDENT_STEP more. Walks an explicit stack, so
        depth is not bounded by the recursion limit. No cycle guard: a
        cycle yields lines forever.
        """
        stack = [(self, indent)]
        while stack:
            employee, level = stack.pop()
            yield " " * level + employee.label
            # reversed so the first report is popped first
            for report_id in reversed(employee.report_ids):
                stack.append((resolve(report_id), level + INDENT_STEP))

    def print(
        self,
        resolve: Resolver,
        indent: int = 0,
        out: Optional[TextIO] = None,
    ) -> None:
        """Write ``lines()`` to *out* (stdout when omitted)."""
        for line in self.lines(resolve, indent):
            print(line, file=out)

    # -- Serialisation ------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "manager_id": self._manager_id,
            "report_ids": list(self._report_ids),
        }

    def __repr__(self) -> str:
        return (
            f"Employee(id={self._id!r}, name={self._name!r}, "
            f"manager_id={self._manager_id!r}, reports={self._report_ids!r})"
        )
