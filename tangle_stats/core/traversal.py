"""Depth, tip and approval statistics over a built tangle.

Depth
=====
  depth(origin) = 0
  depth(child)  = depth(p) + 1, for the first parent p the walk takes off its
                  frontier while the child still has no depth

The first assignment wins and is never revisited, so depth depends on the
order the frontier is drained in, selected with ``TraversalOrder``:

  - ``BREADTH_FIRST`` drains a queue. The first parent found is one on a
    fewest-hops path from the origin.
  - ``DEPTH_FIRST`` drains a stack, enumerating children newest edge first
    and marking nodes visited when popped. When a transaction has parents at
    different depths the result follows whichever branch the walk went down.

Every function here is read-only and deterministic for a given tangle.
"""

from __future__ import annotations

import math
from collections import deque
from enum import Enum
from typing import List, Optional

from tangle_stats.core.exceptions import ConsistencyError
from tangle_stats.core.graph import Tangle
from tangle_stats.core.models import ORIGIN_INDEX


class TraversalOrder(str, Enum):
    BREADTH_FIRST = "breadth"
    DEPTH_FIRST = "depth"


DEFAULT_ORDER = TraversalOrder.BREADTH_FIRST


def _assign_children(dag: Tangle, parent: int, depths: List[Optional[int]]) -> None:
    parent_depth = depths[parent]
    for child in dag.children(parent):
        if depths[child] is None and parent_depth is not None:
            depths[child] = parent_depth + 1


def _walk_breadth_first(dag: Tangle, depths: List[Optional[int]]) -> None:
    visited = {ORIGIN_INDEX}
    queue = deque([ORIGIN_INDEX])
    while queue:
        parent = queue.popleft()
        _assign_children(dag, parent, depths)
        for child in dag.children(parent):
            if child not in visited:
                visited.add(child)
                queue.append(child)


def _walk_depth_first(dag: Tangle, depths: List[Optional[int]]) -> None:
    visited = set()
    stack = [ORIGIN_INDEX]
    while stack:
        parent = stack.pop()
        if parent in visited:
            continue
        visited.add(parent)
        newest_first = list(reversed(dag.children(parent)))
        for child in newest_first:
            if child not in visited:
                stack.append(child)
        _assign_children(dag, parent, depths)


def get_depths(dag: Tangle, order: TraversalOrder = DEFAULT_ORDER) -> List[int]:
    """Return the depth of every transaction, indexed by transaction index.

    Raises:
        ConsistencyError: If some transaction is not reachable from the origin.
    """
    depths: List[Optional[int]] = [None] * dag.node_count
    depths[ORIGIN_INDEX] = 0

    if TraversalOrder(order) is TraversalOrder.DEPTH_FIRST:
        _walk_depth_first(dag, depths)
    else:
        _walk_breadth_first(dag, depths)

    missing = [index for index, depth in enumerate(depths) if depth is None]
    if missing:
        raise ConsistencyError(
            f"All nodes must have a depth, {len(missing)} unreachable from the origin "
            f"(first: {missing[0]})"
        )
    return [depth for depth in depths if depth is not None]


def approval_counts(dag: Tangle) -> List[int]:
    """Number of approvals (child edges) each transaction has received."""
    return [len(dag.children(index)) for index in range(dag.node_count)]


def avg_in_refs(dag: Tangle) -> float:
    """Average number of approvals per transaction, origin included."""
    return sum(approval_counts(dag)) / dag.node_count


def avg_depth(dag: Tangle, order: TraversalOrder = DEFAULT_ORDER) -> float:
    """Mean depth over all transactions, origin included."""
    return sum(get_depths(dag, order)) / dag.node_count


def avg_txs_depth(dag: Tangle, order: TraversalOrder = DEFAULT_ORDER) -> float:
    """Average number of transactions per depth level, not counting depth 0.

    NaN when the tangle holds only the origin.
    """
    if dag.node_count == 1:
        return math.nan
    max_depth = max(get_depths(dag, order))
    return (dag.node_count - 1) / max_depth


def tips(dag: Tangle) -> List[int]:
    """Indices of the transactions nobody approves yet."""
    return [index for index in range(dag.node_count) if not dag.children(index)]


def total_tips(dag: Tangle) -> int:
    return len(tips(dag))
