"""
Org Chart — Registry

Owns every Employee and mediates every structural change. Nodes only
ever mutate their own links; keeping manager links and report lists
consistent happens here.

Every operation resolves all the ids it needs before touching state,
so a raised error never leaves a partial mutation behind.
"""

from __future__ import annotations

import io
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterator, List, Mapping, Optional, TextIO, Tuple

from .constants import REPORT_COUNT_TEMPLATE
from .domain_types import Employee, EmployeeId
from .errors import CycleError, DuplicateIdError, EmployeeNotFoundError
from .graph import is_in_subtree, subtree_size
from .invariants import validate_invariants

if TYPE_CHECKING:
    from .config import ChartSettings

logger = logging.getLogger(__name__)


class OrgRegistry:
    """
    In-memory forest of employees keyed by id.

    ``reject_cycles`` switches on an ancestor walk in ``move`` that
    refuses to place an employee under itself or one of its reports.
    It is off by default: a move can then create a cycle, after which
    ``print`` and ``count_reports`` never finish for employees on it.
    """

    def __init__(self, reject_cycles: bool = False) -> None:
        self._employees: Dict[EmployeeId, Employee] = {}
        self.reject_cycles = reject_cycles

    @classmethod
    def from_settings(cls, settings: "ChartSettings") -> "OrgRegistry":
        return cls(reject_cycles=settings.reject_cycles)

    # -- Lookup -------------------------------------------------------------

    def _lookup(self, employee_id: EmployeeId, called_from: str = "not specified") -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id, called_from)
        return employee

    def find(self, employee_id: Optional[EmployeeId]) -> Optional[Employee]:
        """Return the employee with this id, or None when it is not tracked."""
        if employee_id is None:
            return None
        return self._employees.get(employee_id)

    def get(self, employee_id: EmployeeId) -> Employee:
        return self._lookup(employee_id, "OrgRegistry.get()")

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees.values()))

    @property
    def by_id(self) -> Mapping[EmployeeId, Employee]:
        """Read-only id -> Employee view, in insertion order."""
        return MappingProxyType(self._employees)

    @property
    def employees(self) -> Tuple[Employee, ...]:
        """Every tracked employee, in insertion order."""
        return tuple(self._employees.values())

    def roots(self) -> List[Employee]:
        return [e for e in self._employees.values() if e.is_root]

    def reports_of(self, employee_id: EmployeeId) -> List[Employee]:
        employee = self._lookup(employee_id, "OrgRegistry.reports_of()")
        return [self._employees[rid] for rid in employee.report_ids if rid in self._employees]

    # -- Mutations ----------------------------------------------------------

    def add(
        self,
        employee_id: EmployeeId,
        name: str,
        manager_id: Optional[EmployeeId] = None,
    ) -> Employee:
        """
        Track a new employee, under *manager_id* when that id resolves.

        An omitted or unknown manager id makes the new employee a root.
        Raises DuplicateIdError if *employee_id* is already tracked.
        """
        if employee_id in self._employees:
            raise DuplicateIdError(employee_id)

        manager = self.find(manager_id)
        if manager is None:
            if manager_id is not None:
                logger.info(
                    "Manager %r not found; adding %r as a root", manager_id, employee_id,
                )
            employee = Employee(employee_id, name)
            self._employees[employee_id] = employee
        else:
            employee = Employee(employee_id, name, manager.id)
            self._employees[employee_id] = employee
            manager.add_report(employee_id)

        logger.debug("Added %s under %r", employee.label, employee.manager_id)
        return employee

    def move(self, employee_id: EmployeeId, new_manager_id: EmployeeId) -> None:
        """
        Reparent an employee (with its whole subtree) under a new manager.

        Raises EmployeeNotFoundError if either id is unknown, and
        CycleError when ``reject_cycles`` is on and the new manager sits
        inside the employee's own subtree.
        """
        employee = self._lookup(employee_id, "OrgRegistry.move()")
        new_manager = self._lookup(new_manager_id, "OrgRegistry.move()")

        if self.reject_cycles and is_in_subtree(self._employees, employee.id, new_manager.id):
            raise CycleError(employee.id, new_manager.id)

        old_manager = self.find(employee.manager_id)
        if old_manager is not None:
            old_manager.remove_report(employee.id)
        employee.manager_id = new_manager.id
        new_manager.add_report(employee.id)

        logger.debug(
            "Moved %s from %r to %r",
            employee.label, old_manager.id if old_manager else None, new_manager.id,
        )

    def remove(self, employee_id: EmployeeId) -> None:
        """
        Delete an employee and redistribute its direct reports.

        With a manager, the manager adopts the reports (appended in
        their existing order). Without one, the reports become roots
        and are not attached anywhere else.
        """
        employee = self._lookup(employee_id, "OrgRegistry.remove()")
        report_ids = [rid for rid in employee.report_ids if rid in self._employees]
        manager = self.find(employee.manager_id)

        if manager is not None:
            manager.remove_report(employee.id)
            manager.add_reports(report_ids)
            for rid in report_ids:
                self._employees[rid].manager_id = manager.id
        else:
            for rid in report_ids:
                self._employees[rid].manager_id = None

        del self._employees[employee.id]

        logger.debug(
            "Removed %s; %d report(s) %s",
            employee.label,
            len(report_ids),
            f"adopted by {manager.id!r}" if manager is not None else "now roots",
        )

    # -- Queries ------------------------------------------------------------

    def count_reports(self, employee_id: EmployeeId) -> int:
        """Count every transitive report of an employee (not just direct ones)."""
        employee = self._lookup(employee_id, "OrgRegistry.count_reports()")
        return subtree_size(self._employees, employee.id) - 1

    def describe_report_count(self, employee_id: EmployeeId) -> str:
        employee = self._lookup(employee_id, "OrgRegistry.describe_report_count()")
        return REPORT_COUNT_TEMPLATE.format(
            label=employee.label, count=self.count_reports(employee.id),
        )

    def print(self, out: Optional[TextIO] = None) -> None:
        """Print every root's subtree, roots in registry order."""
        for root in self.roots():
            root.print(self._resolve, 0, out)

    def render(self) -> str:
        buf = io.StringIO()
        self.print(buf)
        return buf.getvalue()

    def validate(self, strict: bool = False) -> None:
        validate_invariants(self._employees, strict=strict)

    def to_dict(self) -> dict:
        return {
            "employees": [e.to_dict() for e in self._employees.values()],
            "reject_cycles": self.reject_cycles,
        }

    # -- Internals ----------------------------------------------------------

    def _resolve(self, employee_id: EmployeeId) -> Employee:
        return self._lookup(employee_id, "OrgRegistry.print()")

