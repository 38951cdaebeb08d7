"""Core data models for tangle ledgers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

ORIGIN_INDEX = 0


class ParentSide(str, Enum):
    """Which of a transaction's two parent slots an edge fills."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Transaction:
    """A node in the tangle.

    Attributes:
        index: Position in the ledger, 0-based, assigned in file order.
            Index 0 is the synthetic origin.
        timestamp: Issue time read from the input. Always ``None`` for the
            origin, and ``None`` for other nodes until their record is read.
    """

    index: int
    timestamp: Optional[int] = None

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Transaction index must be >= 0, got {self.index}")
        if self.index == ORIGIN_INDEX and self.timestamp is not None:
            raise ValueError("The origin transaction cannot carry a timestamp")

    @property
    def is_origin(self) -> bool:
        return self.index == ORIGIN_INDEX


@dataclass(frozen=True)
class Edge:
    """An approval: ``source`` is the parent, ``target`` the child approving it.

    Parallel edges are legal, a transaction may name the same parent in
    both slots.
    """

    source: int
    target: int

    def __post_init__(self) -> None:
        if self.source < 0:
            raise ValueError(f"Edge source must be >= 0, got {self.source}")
        if self.target < 0:
            raise ValueError(f"Edge target must be >= 0, got {self.target}")
