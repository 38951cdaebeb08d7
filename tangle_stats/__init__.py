"""Tangle Stats: structural statistics for tangle-style DAG ledgers."""

__version__ = "0.1.0"

from tangle_stats.core.bipartite import is_bipartite
from tangle_stats.core.exceptions import (
    ConsistencyError,
    CycleError,
    FormatError,
    ParentIndexError,
    TangleError,
)
from tangle_stats.core.graph import Tangle
from tangle_stats.core.models import Edge, ParentSide, Transaction
from tangle_stats.core.parser import load_database, parse_database
from tangle_stats.core.traversal import (
    TraversalOrder,
    approval_counts,
    avg_depth,
    avg_in_refs,
    avg_txs_depth,
    get_depths,
    tips,
    total_tips,
)

__all__ = [
    "ConsistencyError",
    "CycleError",
    "Edge",
    "FormatError",
    "ParentIndexError",
    "ParentSide",
    "Tangle",
    "TangleError",
    "Transaction",
    "TraversalOrder",
    "__version__",
    "approval_counts",
    "avg_depth",
    "avg_in_refs",
    "avg_txs_depth",
    "get_depths",
    "is_bipartite",
    "load_database",
    "parse_database",
    "tips",
    "total_tips",
]
