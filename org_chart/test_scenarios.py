"""
Org Chart — Test Scenarios

Executable end-to-end scenarios:
  1. Build Bob -> Tim -> Ralph and count reports at every level
  2. Add Kevin, move Tim under Kevin, recount
  3. Two-root forest listing in insertion order
  4. Remove a mid-level manager (grandparent adopts)
  5. Remove a root (reports orphaned to roots)
  6. Demo walkthrough output

Run:  python -m org_chart.test_scenarios
"""

from __future__ import annotations

import io
import sys

from org_chart.demo import SEPARATOR, run_demo
from org_chart.diagnostics import compute_diagnostics
from org_chart.registry import OrgRegistry


_pass = 0
_fail = 0


def _test(name, fn):
    global _pass, _fail
    try:
        fn()
        print(f"  [PASS] {name}")
        _pass += 1
    except Exception as exc:
        print(f"  [FAIL] {name}: {exc!r}")
        _fail += 1


def _bob_tim_ralph() -> OrgRegistry:
    registry = OrgRegistry()
    registry.add(1, "Bob")
    registry.add(3, "Tim", 1)
    registry.add(4, "Ralph", 3)
    return registry


# ───────────────────────────────────────────────────────────────
# Scenario 1: chain of three
# ───────────────────────────────────────────────────────────────

def test_scenario_1_chain_counts():
    registry = _bob_tim_ralph()
    assert registry.count_reports(1) == 2
    assert registry.count_reports(3) == 1
    assert registry.count_reports(4) == 0
    registry.validate(strict=True)


# ───────────────────────────────────────────────────────────────
# Scenario 2: move a subtree to another root
# ───────────────────────────────────────────────────────────────

def test_scenario_2_move_subtree():
    registry = _bob_tim_ralph()
    registry.add(2, "Kevin")
    registry.move(3, 2)

    assert registry.get(3).manager_id == 2
    assert registry.get(2).report_ids == (3,)
    assert registry.get(4).manager_id == 3
    assert registry.get(1).report_ids == ()
    assert registry.count_reports(2) == 2
    assert registry.count_reports(1) == 0
    assert registry.render() == "Bob [1]\nKevin [2]\n  Tim [3]\n    Ralph [4]\n"
    registry.validate(strict=True)


# ───────────────────────────────────────────────────────────────
# Scenario 3: two roots listed in insertion order
# ───────────────────────────────────────────────────────────────

def test_scenario_3_two_root_listing():
    registry = OrgRegistry()
    registry.add(10, "Ada")
    registry.add(20, "Grace")
    registry.add(11, "Linus", 10)
    registry.add(21, "Ken", 20)
    registry.add(12, "Guido", 10)
    registry.add(13, "Barbara", 11)

    expected = (
        "Ada [10]\n"
        "  Linus [11]\n"
        "    Barbara [13]\n"
        "  Guido [12]\n"
        "Grace [20]\n"
        "  Ken [21]\n"
    )
    assert registry.render() == expected
    diagnostics = compute_diagnostics(registry)
    assert diagnostics["roots"] == [10, 20]
    assert diagnostics["max_depth"] == 2


# ───────────────────────────────────────────────────────────────
# Scenario 4: remove a mid-level manager
# ───────────────────────────────────────────────────────────────

def test_scenario_4_remove_middle_manager():
    registry = _bob_tim_ralph()
    registry.add(5, "Sue", 3)
    registry.remove(3)

    assert registry.get(1).report_ids == (4, 5)
    assert registry.get(4).manager_id == 1
    assert registry.get(5).manager_id == 1
    assert 3 not in registry
    assert registry.count_reports(1) == 2
    assert registry.render() == "Bob [1]\n  Ralph [4]\n  Sue [5]\n"
    registry.validate(strict=True)


# ───────────────────────────────────────────────────────────────
# Scenario 5: remove a root
# ───────────────────────────────────────────────────────────────

def test_scenario_5_remove_root():
    registry = _bob_tim_ralph()
    registry.add(5, "Sue", 1)
    registry.remove(1)

    assert registry.get(3).manager_id is None
    assert registry.get(5).manager_id is None
    assert all(3 not in e.report_ids and 5 not in e.report_ids for e in registry)
    assert registry.render() == "Tim [3]\n  Ralph [4]\nSue [5]\n"
    registry.validate(strict=True)


# ───────────────────────────────────────────────────────────────
# Scenario 6: demo walkthrough
# ───────────────────────────────────────────────────────────────

def test_scenario_6_demo_output():
    buf = io.StringIO()
    registry = run_demo(OrgRegistry(), buf)
    sep = SEPARATOR + "\n"

    expected = (
        "Kevin [2]\nBob [1]\n" + sep
        + "Kevin [2]\nBob [1]\n  Tim [3]\n" + sep
        + "Kevin [2]\n  Tim [3]\nBob [1]\n" + sep
        + "Bob [1]\n  Kevin [2]\n    Tim [3]\n    Ralph [4]\n"
        + "Bob [1] has 3 reports.\n" + sep
        + "Bob [1]\n  Tim [3]\n  Ralph [4]\n"
        + "Bob [1] has 2 reports.\n"
    )
    assert buf.getvalue() == expected
    assert len(registry) == 3


# ───────────────────────────────────────────────────────────────
# Runner
# ───────────────────────────────────────────────────────────────

def main():
    tests = [
        ("Scenario 1: chain counts", test_scenario_1_chain_counts),
        ("Scenario 2: move subtree", test_scenario_2_move_subtree),
        ("Scenario 3: two-root listing", test_scenario_3_two_root_listing),
        ("Scenario 4: remove middle manager", test_scenario_4_remove_middle_manager),
        ("Scenario 5: remove root", test_scenario_5_remove_root),
        ("Scenario 6: demo output", test_scenario_6_demo_output),
    ]

    print(f"\nRunning {len(tests)} scenarios...\n")
    for name, fn in tests:
        _test(name, fn)

    print(f"\n{'='*60}")
    print(f"  {_pass} passed, {_fail} failed out of {_pass + _fail}")
    print(f"{'='*60}")

    if _fail > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
