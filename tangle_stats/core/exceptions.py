"""Errors raised while building or analysing a tangle."""

from __future__ import annotations

from typing import Optional

from tangle_stats.core.models import ParentSide


class TangleError(Exception):
    """Base class for every error raised by ``tangle_stats``."""


class FormatError(TangleError, ValueError):
    """The ledger description is malformed.

    Attributes:
        line: 1-based line of the input the problem was found on, or
            ``None`` when it does not belong to a single line.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class ParentIndexError(FormatError):
    """A parent value points past the last transaction of the ledger."""

    def __init__(
        self, side: ParentSide, parent: int, node_count: int, line: Optional[int] = None
    ) -> None:
        super().__init__(
            f"{side.value} parent {parent} is out of range "
            f"(the ledger has {node_count} transactions including the origin)",
            line=line,
        )
        self.side = side
        self.parent = parent
        self.node_count = node_count


class CycleError(TangleError, ValueError):
    """Adding a parent edge would close a cycle.

    ``parent`` and ``child`` are 1-based positions, the origin being 1.
    """

    def __init__(self, side: ParentSide, parent: int, child: int) -> None:
        super().__init__(
            f"The DAG would cycle adding {side.value} parent {parent} to node {child}"
        )
        self.side = side
        self.parent = parent
        self.child = child


class ConsistencyError(TangleError, RuntimeError):
    """A traversal left the tangle in a state construction should rule out."""
