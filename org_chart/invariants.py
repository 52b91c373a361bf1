"""
Org Chart — Invariant Checks

Hard-fail validation. Every check raises InvariantViolationError on failure.

Acyclicity and report uniqueness are only checked in strict mode:
registry operations do not enforce either one.
"""

from __future__ import annotations

from typing import Mapping

from .domain_types import Employee, EmployeeId
from .graph import detect_cycles, find_duplicate_reports


class InvariantViolationError(Exception):
    """Raised when an org chart invariant is violated."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[INVARIANT:{rule}] {detail}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_invariants(
    employees: Mapping[EmployeeId, Employee], strict: bool = False,
) -> None:
    """
    Run the link-consistency checks. Raises InvariantViolationError on
    the first failure. ``strict`` adds the duplicate-report and cycle
    checks.
    """
    _check_unique_ids(employees)
    _check_manager_refs(employees)
    _check_manager_lists_report(employees)
    _check_report_back_links(employees)
    if strict:
        _check_no_duplicate_reports(employees)
        _check_no_cycles(employees)


# ---------------------------------------------------------------------------
# Individual checks (private)
# ---------------------------------------------------------------------------

def _check_unique_ids(employees: Mapping[EmployeeId, Employee]) -> None:
    """Every key must be the id of the employee stored under it."""
    for eid, employee in employees.items():
        if employee.id != eid:
            raise InvariantViolationError(
                "unique_ids",
                f"Employee {employee.id!r} is stored under key {eid!r}"
            )


def _check_manager_refs(employees: Mapping[EmployeeId, Employee]) -> None:
    """A non-null manager link must point at a tracked employee."""
    for employee in employees.values():
        if employee.manager_id is not None and employee.manager_id not in employees:
            raise InvariantViolationError(
                "manager_refs",
                f"Employee {employee.id!r} reports to untracked "
                f"manager {employee.manager_id!r}"
            )


def _check_manager_lists_report(employees: Mapping[EmployeeId, Employee]) -> None:
    """An employee with a manager must appear in that manager's reports."""
    for employee in employees.values():
        if employee.manager_id is None:
            continue
        manager = employees[employee.manager_id]
        if employee.id not in manager.report_ids:
            raise InvariantViolationError(
                "manager_lists_report",
                f"Employee {employee.id!r} is missing from the reports "
                f"of its manager {manager.id!r}"
            )


def _check_report_back_links(employees: Mapping[EmployeeId, Employee]) -> None:
    """Every listed report must be tracked and point back at its lister."""
    for employee in employees.values():
        for report_id in employee.report_ids:
            if report_id not in employees:
                raise InvariantViolationError(
                    "report_refs",
                    f"Employee {employee.id!r} lists untracked report {report_id!r}"
                )
            if employees[report_id].manager_id != employee.id:
                raise InvariantViolationError(
                    "report_back_link",
                    f"Employee {employee.id!r} lists {report_id!r} as a report "
                    f"but its manager is {employees[report_id].manager_id!r}"
                )


def _check_no_duplicate_reports(employees: Mapping[EmployeeId, Employee]) -> None:
    duplicates = find_duplicate_reports(employees)
    if duplicates:
        manager_id, repeated = next(iter(duplicates.items()))
        raise InvariantViolationError(
            "duplicate_reports",
            f"Employee {manager_id!r} lists {repeated!r} more than once"
        )


def _check_no_cycles(employees: Mapping[EmployeeId, Employee]) -> None:
    cycles = detect_cycles(employees)
    if cycles:
        cycle_str = " -> ".join(str(eid) for eid in cycles[0])
        raise InvariantViolationError(
            "cycle",
            f"Reporting cycle detected: {cycle_str}"
        )
