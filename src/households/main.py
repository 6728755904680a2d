"""
Main entry for the households importer.

This module is intentionally thin:
- argument checking
- import orchestration
- report printing

No parsing or business logic lives here.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from households.core.pipeline import import_households
from households.logging import get_logger
from households.reporting import print_report

log = get_logger("main")

USAGE = "Usage: households-report input.csv"


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        print(USAGE)
        return

    input_path = args[0]
    print(f"Input file: {input_path}")

    try:
        index = import_households(input_path, skip_header=False)
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise

    print_report(index)


if __name__ == "__main__":
    main()
