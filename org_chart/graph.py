"""
Org Chart — Graph Utilities

Pure functions over an id -> Employee mapping. No mutation.
Edges run manager -> report, following each Employee's report_ids.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Set, Tuple

from .domain_types import Employee, EmployeeId


# ---------------------------------------------------------------------------
# Subtree size
# ---------------------------------------------------------------------------

def subtree_size(employees: Mapping[EmployeeId, Employee], root_id: EmployeeId) -> int:
    """
    Number of employees reachable from *root_id* through report links,
    the root itself included.

    Report ids that are no longer tracked are skipped. Iterative, so
    deep chains are fine. There is no revisit guard: on a cycle the
    walk never finishes.
    """
    count = 0
    stack: List[EmployeeId] = [root_id]
    while stack:
        eid = stack.pop()
        count += 1
        stack.extend(r for r in employees[eid].report_ids if r in employees)
    return count


# ---------------------------------------------------------------------------
# Ancestors
# ---------------------------------------------------------------------------

def iter_ancestors(
    employees: Mapping[EmployeeId, Employee], employee_id: EmployeeId,
) -> Iterator[EmployeeId]:
    """
    Yield manager ids from the direct manager up to the root.

    Stops at a root, at an untracked manager id, or on the first
    repeated id so an existing cycle cannot spin forever.
    """
    seen: Set[EmployeeId] = {employee_id}
    current = employees[employee_id].manager_id
    while current is not None and current in employees and current not in seen:
        yield current
        seen.add(current)
        current = employees[current].manager_id


def is_in_subtree(
    employees: Mapping[EmployeeId, Employee],
    root_id: EmployeeId,
    candidate_id: EmployeeId,
) -> bool:
    """True if *candidate_id* is *root_id* or reports to it transitively."""
    if candidate_id == root_id:
        return True
    return any(a == root_id for a in iter_ancestors(employees, candidate_id))


# ---------------------------------------------------------------------------
# Depth
# ---------------------------------------------------------------------------

def compute_depths(employees: Mapping[EmployeeId, Employee]) -> Dict[EmployeeId, int]:
    """
    Depth of every employee reachable from a root (roots are depth 0).
    Employees only reachable through a cycle are absent from the result.
    """
    depths: Dict[EmployeeId, int] = {}
    stack: List[Tuple[EmployeeId, int]] = [
        (eid, 0) for eid, e in reversed(list(employees.items())) if e.is_root
    ]
    while stack:
        eid, depth = stack.pop()
        if eid in depths:
            continue
        depths[eid] = depth
        for report_id in reversed(employees[eid].report_ids):
            if report_id in employees and report_id not in depths:
                stack.append((report_id, depth + 1))
    return depths


# ---------------------------------------------------------------------------
# Duplicate reports
# ---------------------------------------------------------------------------

def find_duplicate_reports(
    employees: Mapping[EmployeeId, Employee],
) -> Dict[EmployeeId, List[EmployeeId]]:
    """Map manager id -> report ids listed more than once under it."""
    duplicates: Dict[EmployeeId, List[EmployeeId]] = {}
    for eid, employee in employees.items():
        seen: Set[EmployeeId] = set()
        repeated: List[EmployeeId] = []
        for report_id in employee.report_ids:
            if report_id in seen and report_id not in repeated:
                repeated.append(report_id)
            seen.add(report_id)
        if repeated:
            duplicates[eid] = repeated
    return duplicates


# ---------------------------------------------------------------------------
# Cycle detection
# ---------------------------------------------------------------------------

def detect_cycles(employees: Mapping[EmployeeId, Employee]) -> List[List[EmployeeId]]:
    """
    Detect cycles along report links.

    Returns a list of cycles (each a list of employee ids, first id
    repeated at the end). Uses iterative DFS with explicit colour
    tracking, visiting employees in registry order.
    """
    WHITE, GREY, BLACK = 0, 1, 2
    colour: Dict[EmployeeId, int] = {eid: WHITE for eid in employees}
    cycles: List[List[EmployeeId]] = []

    def _dfs(start: EmployeeId) -> None:
        stack: List[Tuple[EmployeeId, int]] = [(start, 0)]
        colour[start] = GREY

        while stack:
            node, idx = stack[-1]
            neighbours = [r for r in employees[node].report_ids if r in employees]
            if idx < len(neighbours):
                stack[-1] = (node, idx + 1)
                nbr = neighbours[idx]
                if colour[nbr] == GREY:
                    path = [sn for sn, _ in stack]
                    cycles.append(path[path.index(nbr):] + [nbr])
                elif colour[nbr] == WHITE:
                    colour[nbr] = GREY
                    stack.append((nbr, 0))
            else:
                colour[node] = BLACK
                stack.pop()

    for eid in employees:
        if colour[eid] == WHITE:
            _dfs(eid)

    return cycles
