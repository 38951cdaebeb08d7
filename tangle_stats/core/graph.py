"""Tangle class — the DAG container every analysis reads from."""

from __future__ import annotations

from typing import Iterator, List, Optional

from tangle_stats.core.exceptions import CycleError
from tangle_stats.core.models import ORIGIN_INDEX, Edge, ParentSide, Transaction


class Tangle:
    """A tangle ledger held as a node array plus per-node adjacency lists.

    Nodes are addressed by their index only. Edges point from parent to
    child. The origin (index 0) is created with the tangle.

    Example::

        from tangle_stats.core.graph import Tangle
        from tangle_stats.core.models import ParentSide

        dag = Tangle()
        tx = dag.add_node()
        dag.add_approval(0, tx.index, ParentSide.LEFT)
        dag.add_approval(0, tx.index, ParentSide.RIGHT)
        dag.freeze()
    """

    def __init__(self) -> None:
        self._nodes: List[Transaction] = [Transaction(index=ORIGIN_INDEX)]
        # adjacency lists, with multiplicity, in insertion order
        self._children: List[List[int]] = [[]]
        self._parents: List[List[int]] = [[]]
        self._edges: List[Edge] = []
        self._frozen = False

    # ── Construction ─────────────────────────────────────────────────

    def add_node(self, timestamp: Optional[int] = None) -> Transaction:
        """Append a transaction and return it."""
        self._check_mutable()
        node = Transaction(index=len(self._nodes), timestamp=timestamp)
        self._nodes.append(node)
        self._children.append([])
        self._parents.append([])
        return node

    def set_timestamp(self, index: int, timestamp: int) -> None:
        self._check_mutable()
        node = self._nodes[index]
        if node.is_origin:
            raise ValueError("The origin transaction cannot carry a timestamp")
        node.timestamp = timestamp

    def add_approval(self, parent: int, child: int, side: ParentSide) -> Edge:
        """Record that ``child`` approves ``parent`` through the given slot.

        Raises:
            IndexError: If either index does not name a transaction.
            CycleError: If ``parent`` is reachable from ``child``, so the new
                edge would close a cycle. Self-approval is such a cycle.
        """
        self._check_mutable()
        self._check_index(parent)
        self._check_index(child)
        if self.has_path(child, parent):
            raise CycleError(side, parent + 1, child + 1)
        edge = Edge(source=parent, target=child)
        self._children[parent].append(child)
        self._parents[child].append(parent)
        self._edges.append(edge)
        return edge

    def freeze(self) -> "Tangle":
        """Forbid any further mutation. Returns the tangle for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Read access ──────────────────────────────────────────────────

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def origin(self) -> Transaction:
        return self._nodes[ORIGIN_INDEX]

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Transaction:
        return self._nodes[index]

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._nodes)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def children(self, index: int) -> List[int]:
        """Indices of the transactions approving ``index``, one per edge."""
        return list(self._children[index])

    def parents(self, index: int) -> List[int]:
        """Indices ``index`` approves, one per edge (two for non-origin nodes)."""
        return list(self._parents[index])

    def neighbors(self, index: int) -> List[int]:
        """Adjacent indices ignoring edge direction, one per edge."""
        return self._children[index] + self._parents[index]

    def has_path(self, source: int, target: int) -> bool:
        """True if ``target`` is reachable from ``source`` along child edges.

        A node always reaches itself.
        """
        if source == target:
            return True
        visited = {source}
        stack = [source]
        while stack:
            current = stack.pop()
            for child in self._children[current]:
                if child == target:
                    return True
                if child not in visited:
                    visited.add(child)
                    stack.append(child)
        return False

    # ── Internals ────────────────────────────────────────────────────

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Tangle is frozen and cannot be modified")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._nodes):
            raise IndexError(
                f"Transaction index {index} out of range (0..{len(self._nodes) - 1})"
            )
