"""Console entry point: print the statistics of a ledger file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from .core.exceptions import TangleError
from .core.parser import load_database
from .core.traversal import TraversalOrder
from .report import ReportConfig, build_report, process_file

logger = logging.getLogger(__name__)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tangle-stats",
        description="Compute depth, tip and approval statistics of a tangle ledger.",
    )
    parser.add_argument("path", help="Path to the ledger description file.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as a JSON object instead of text.",
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in TraversalOrder],
        default=TraversalOrder.BREADTH_FIRST.value,
        help="Traversal used to assign depths (default: breadth).",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=3,
        help="Decimal places for averages in the text report.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = ReportConfig(order=TraversalOrder(args.order), precision=args.precision)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.json:
            report = build_report(load_database(args.path), config)
            print(json.dumps(report.to_dict(), indent=2))
        else:
            process_file(args.path, config)
    except OSError as exc:
        logger.debug("Could not open file %s", args.path, exc_info=True)
        print(f"error: could not open file {args.path}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except TangleError as exc:
        logger.debug("Rejected ledger %s", args.path, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
