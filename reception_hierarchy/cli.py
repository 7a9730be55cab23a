# reception_hierarchy/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from reception_hierarchy.controllers import build_hierarchy, load_reception_rows
from reception_hierarchy.utilities import configure_logging, open_for_write
from reception_hierarchy.views import ExpansionState, render_outline

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="reception-hierarchy",
        description="Group a reception workbook into positions, work groups and items with income/expense totals.",
    )
    ap.add_argument("input", type=Path, help="Path to the reception workbook (.xlsx or .csv)")
    ap.add_argument("--sheet", default=0,
                    help="Sheet name or 0-based index to read (default: first sheet)")
    ap.add_argument("--emit", choices=["outline", "json"], default="outline",
                    help="Output format: outline (default) or json")
    ap.add_argument("--output", type=Path, help="Write to this file instead of stdout")
    ap.add_argument("--collapse-items", action="store_true",
                    help="Outline only: hide line items under each income/expense node")
    ap.add_argument("--log-file", type=Path, help="Also write a debug log to this file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress to the console")
    return ap


def _sheet(value: object) -> object:
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return value


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, "INFO" if args.verbose else "WARNING")

    if not args.input.exists():
        raise SystemExit(f"Reception workbook not found: {args.input}")
    if not args.input.is_file():
        raise SystemExit(f"Input path is not a file: {args.input}")

    rows = load_reception_rows(args.input, sheet_name=_sheet(args.sheet))
    hierarchy = build_hierarchy(rows)
    if hierarchy is None:
        log.warning("No rows found in %s", args.input)

    if args.emit == "json":
        payload = {"data": None} if hierarchy is None else hierarchy.to_dict()
        text = json.dumps(payload, ensure_ascii=False, indent=2)
    else:
        state = ExpansionState()
        if args.collapse_items:
            state.collapse_level(hierarchy, 4)
        text = render_outline(hierarchy, state)

    if args.output:
        with open_for_write(args.output) as fp:
            fp.write(text + "\n")
        log.info("Wrote %s", args.output)
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
