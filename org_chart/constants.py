"""
Org Chart — Rendering Constants

Module-level defaults used by node rendering and report-count text.
"""

# Spaces added per level of depth when printing a subtree.
INDENT_STEP: int = 2

# Template for the human-readable report count line.
REPORT_COUNT_TEMPLATE: str = "{label} has {count} reports."
