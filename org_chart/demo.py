"""
Org Chart — Demo Walkthrough

Builds a small chart on an explicitly owned registry and prints it
after each structural change.

Run:  python -m org_chart.demo
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .config import ChartSettings, load_settings
from .logging_config import setup_logging
from .registry import OrgRegistry

logger = logging.getLogger(__name__)

SEPARATOR = "\n" + "-" * 46 + "\n"


def run_demo(registry: OrgRegistry, out: Optional[TextIO] = None) -> OrgRegistry:
    """Sequence a fixed set of registry calls, printing the chart as it changes."""
    out = out or sys.stdout

    registry.add(2, "Kevin")
    registry.add(1, "Bob")
    registry.print(out)
    print(SEPARATOR, file=out)

    registry.add(3, "Tim", 1)
    registry.print(out)
    print(SEPARATOR, file=out)

    registry.move(3, 2)
    registry.print(out)
    print(SEPARATOR, file=out)

    registry.move(2, 1)
    registry.add(4, "Ralph", 2)
    registry.print(out)
    print(registry.describe_report_count(1), file=out)
    print(SEPARATOR, file=out)

    registry.remove(2)
    registry.print(out)
    print(registry.describe_report_count(1), file=out)

    logger.info("Demo finished with %d employee(s)", len(registry))
    return registry


def main(settings: Optional[ChartSettings] = None) -> None:
    settings = settings or load_settings()
    setup_logging(settings.log_level)
    run_demo(OrgRegistry.from_settings(settings))


if __name__ == "__main__":
    main()
