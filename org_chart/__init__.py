"""
Org Chart
In-memory organizational hierarchy: a forest of employees linked by
manager / report relations, mutated only through OrgRegistry.
"""

from .domain_types import Employee, EmployeeId
from .errors import (
    OrgChartError,
    DuplicateIdError,
    EmployeeNotFoundError,
    CycleError,
)
from .invariants import InvariantViolationError, validate_invariants
from .registry import OrgRegistry
from .graph import (
    subtree_size,
    iter_ancestors,
    is_in_subtree,
    compute_depths,
    detect_cycles,
    find_duplicate_reports,
)
from .hashing import canonical_serialize, canonical_hash
from .diagnostics import compute_diagnostics
from .config import ChartSettings, load_settings
from .logging_config import setup_logging
from .constants import INDENT_STEP, REPORT_COUNT_TEMPLATE

__all__ = [
    "Employee",
    "EmployeeId",
    "OrgChartError",
    "DuplicateIdError",
    "EmployeeNotFoundError",
    "CycleError",
    "InvariantViolationError",
    "validate_invariants",
    "OrgRegistry",
    "subtree_size",
    "iter_ancestors",
    "is_in_subtree",
    "compute_depths",
    "detect_cycles",
    "find_duplicate_reports",
    "canonical_serialize",
    "canonical_hash",
    "compute_diagnostics",
    "ChartSettings",
    "load_settings",
    "setup_logging",
    "INDENT_STEP",
    "REPORT_COUNT_TEMPLATE",
]
