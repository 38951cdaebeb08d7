"""Summary report over a parsed ledger file."""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from tangle_stats.core.bipartite import is_bipartite
from tangle_stats.core.graph import Tangle
from tangle_stats.core.parser import load_database
from tangle_stats.core.traversal import (
    DEFAULT_ORDER,
    TraversalOrder,
    avg_depth,
    avg_in_refs,
    avg_txs_depth,
    total_tips,
)

logger = logging.getLogger(__name__)


@dataclass
class ReportConfig:
    """Options for building and printing a report.

    Attributes:
        order: Frontier discipline used for depth statistics.
        precision: Decimal places for averages in the text output.
    """

    order: TraversalOrder = DEFAULT_ORDER
    precision: int = 3

    def __post_init__(self) -> None:
        self.order = TraversalOrder(self.order)
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")


@dataclass
class TangleReport:
    transactions: int
    avg_depth: float
    avg_txs_depth: float
    avg_in_refs: float
    total_tips: int
    bipartite: bool

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for JSON output. NaN averages become ``None``."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, float) and math.isnan(value):
                data[key] = None
        return data


def build_report(dag: Tangle, config: Optional[ReportConfig] = None) -> TangleReport:
    config = config or ReportConfig()
    return TangleReport(
        transactions=dag.node_count - 1,
        avg_depth=avg_depth(dag, config.order),
        avg_txs_depth=avg_txs_depth(dag, config.order),
        avg_in_refs=avg_in_refs(dag),
        total_tips=total_tips(dag),
        bipartite=is_bipartite(dag),
    )


def _format_average(value: float, precision: int) -> str:
    if math.isnan(value):
        return "NaN"
    return f"{value:.{precision}f}"


def format_report(report: TangleReport, config: Optional[ReportConfig] = None) -> str:
    config = config or ReportConfig()
    lines = [
        f"AVG DAG DEPTH: {_format_average(report.avg_depth, config.precision)}",
        f"AVG TXS PER DEPTH: {_format_average(report.avg_txs_depth, config.precision)}",
        f"AVG REF: {_format_average(report.avg_in_refs, config.precision)}",
        f"TOTAL TIPS: {report.total_tips}",
        f"BIPARTITE: {'yes' if report.bipartite else 'no'}",
    ]
    return "\n".join(lines)


def process_file(
    path: Union[str, Path],
    config: Optional[ReportConfig] = None,
    out: Optional[TextIO] = None,
) -> TangleReport:
    """Parse the ledger at ``path``, print its report and return it.

    Args:
        path: Ledger description file.
        config: Report options. Uses defaults if None.
        out: Where to write the text report. Defaults to ``sys.stdout``.

    Raises:
        OSError: If the file cannot be opened or read.
        TangleError: If the description is malformed or cyclic.
    """
    config = config or ReportConfig()
    dag = load_database(path)
    logger.info("Loaded %s: %d transactions", path, dag.node_count - 1)
    report = build_report(dag, config)
    print(format_report(report, config), file=out or sys.stdout)
    return report
