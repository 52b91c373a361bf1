"""
Org Chart — Diagnostics

Compute a diagnostic snapshot of a registry. Safe on charts that
already contain a reporting cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .graph import compute_depths, detect_cycles, find_duplicate_reports

if TYPE_CHECKING:
    from .registry import OrgRegistry


def compute_diagnostics(registry: "OrgRegistry") -> dict:
    """Return a diagnostic dict summarising the current chart health."""
    employees = registry.by_id
    roots = [e.id for e in registry.roots()]
    depths = compute_depths(employees)
    cycles = detect_cycles(employees)
    duplicates = find_duplicate_reports(employees)
    unreachable = [eid for eid in employees if eid not in depths]

    warnings: list[str] = []

    if cycles:
        warnings.append(
            f"{len(cycles)} reporting cycle(s) — print() and count_reports() "
            f"never finish for employees on them"
        )
    if duplicates:
        warnings.append(
            f"{len(duplicates)} employee(s) list a report more than once: "
            f"{', '.join(str(eid) for eid in duplicates)}"
        )
    if unreachable:
        warnings.append(
            f"{len(unreachable)} employee(s) unreachable from any root: "
            f"{', '.join(str(eid) for eid in unreachable)}"
        )

    return {
        "employee_count": len(employees),
        "root_count": len(roots),
        "roots": roots,
        "max_depth": max(depths.values(), default=0),
        "cycles": cycles,
        "duplicate_reports": duplicates,
        "warnings": warnings,
    }
