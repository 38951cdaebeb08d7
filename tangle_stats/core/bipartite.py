"""Two-coloring of a tangle viewed as an undirected graph."""

from __future__ import annotations

from collections import deque
from typing import List, Optional

from tangle_stats.core.graph import Tangle
from tangle_stats.core.models import ORIGIN_INDEX


def two_coloring(dag: Tangle) -> Optional[List[int]]:
    """Color every transaction 0 or 1 so that no edge joins equal colors.

    Edge direction is ignored. Coloring starts at the origin with color 0;
    any component the origin does not reach is started from its lowest
    index, also with color 0.

    Returns:
        The color of each transaction by index, or ``None`` if the tangle
        has an odd undirected cycle.
    """
    colors: List[Optional[int]] = [None] * dag.node_count
    # the origin is index 0, so it is always colored first
    for start in range(ORIGIN_INDEX, dag.node_count):
        if colors[start] is not None:
            continue
        colors[start] = 0
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in dag.neighbors(current):
                if colors[neighbour] is None:
                    colors[neighbour] = 1 - colors[current]
                    queue.append(neighbour)
                elif colors[neighbour] == colors[current]:
                    return None

    return [color for color in colors if color is not None]


def is_bipartite(dag: Tangle) -> bool:
    return two_coloring(dag) is not None
