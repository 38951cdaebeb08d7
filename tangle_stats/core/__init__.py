from tangle_stats.core.bipartite import is_bipartite
from tangle_stats.core.graph import Tangle
from tangle_stats.core.models import Edge, ParentSide, Transaction
from tangle_stats.core.parser import load_database, parse_database
from tangle_stats.core.traversal import TraversalOrder, get_depths

__all__ = [
    "Edge",
    "ParentSide",
    "Tangle",
    "Transaction",
    "TraversalOrder",
    "get_depths",
    "is_bipartite",
    "load_database",
    "parse_database",
]
