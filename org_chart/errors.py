"""
Org Chart — Exception Hierarchy

Every structural failure is raised before the registry is touched,
so catching one of these never leaves a partially-updated chart.
"""

from __future__ import annotations

from typing import Hashable


class OrgChartError(Exception):
    """Base exception for all org chart operations."""


class DuplicateIdError(OrgChartError):
    """Raised by ``add`` when the requested id is already tracked."""

    def __init__(self, employee_id: Hashable) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee id {employee_id!r} is already taken")


class EmployeeNotFoundError(OrgChartError, KeyError):
    """Raised when an id does not resolve to a tracked employee."""

    def __init__(
        self, employee_id: Hashable, called_from: str = "not specified",
    ) -> None:
        self.employee_id = employee_id
        self.called_from = called_from
        super().__init__(
            f"Employee id {employee_id!r} does not match any tracked "
            f"employee (called from {called_from})"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class CycleError(OrgChartError):
    """Raised when a move would place an employee under its own subtree."""

    def __init__(self, employee_id: Hashable, manager_id: Hashable) -> None:
        self.employee_id = employee_id
        self.manager_id = manager_id
        super().__init__(
            f"Cannot move {employee_id!r} under {manager_id!r}: "
            f"{manager_id!r} is {employee_id!r} or one of its reports"
        )
