"""Parser for the line-oriented ledger description.

Format::

    <n>
    <left_parent> <right_parent> <timestamp>     (n lines)

Parent values are 1-based positions with the origin at position 1, so a
value ``p`` resolves to transaction index ``p - 1``.

Usage::

    from tangle_stats.core.parser import load_database, parse_database

    dag = load_database("database.txt")

    with open("database.txt", "rb") as stream:
        dag = parse_database(stream)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, AnyStr, Union

from tangle_stats.core.exceptions import FormatError, ParentIndexError
from tangle_stats.core.graph import Tangle
from tangle_stats.core.models import ParentSide

logger = logging.getLogger(__name__)

_RECORD_FIELDS = ("left parent", "right parent", "timestamp")


def _read_line(stream: IO[AnyStr], lineno: int) -> str:
    """Read one raw line, decoding bytes as UTF-8. Returns "" at end of input."""
    raw = stream.readline()
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError(f"input is not valid UTF-8 ({exc.reason})", line=lineno) from exc
    return raw


def _parse_unsigned(token: str, field: str, lineno: int) -> int:
    if not (token.isascii() and token.isdigit()):
        raise FormatError(f"{field} {token!r} is not an unsigned integer", line=lineno)
    return int(token)


def _resolve_parent(value: int, side: ParentSide, dag: Tangle, lineno: int) -> int:
    """Turn a 1-based parent value into a transaction index."""
    if value == 0:
        raise FormatError(f"{side.value} parent should be > 0", line=lineno)
    if value > dag.node_count:
        raise ParentIndexError(side, value, dag.node_count, line=lineno)
    return value - 1


def parse_database(stream: IO[AnyStr]) -> Tangle:
    """Build a tangle from an open ledger description.

    Args:
        stream: Binary (UTF-8) or text stream positioned at the start of the
            description. It is read to the end of the last record plus one
            line and is not closed.

    Returns:
        A frozen ``Tangle`` holding the origin and every declared transaction.

    Raises:
        FormatError: Empty input, a malformed count or record, too few
            records, or data after the last record.
        ParentIndexError: A parent value past the last transaction.
        CycleError: A parent edge that would close a cycle.
    """
    dag = Tangle()

    header = _read_line(stream, 1)
    if not header:
        raise FormatError("input is empty")
    n = _parse_unsigned(header.strip(), "transaction count", 1)
    logger.debug("Ledger declares %d transactions", n)

    for _ in range(n):
        dag.add_node()

    for record in range(1, n + 1):
        lineno = record + 1
        line = _read_line(stream, lineno)
        if not line:
            raise FormatError(
                f"expected {n} transactions but the input ends after {record - 1}"
            )

        tokens = line.strip().split(" ")
        if len(tokens) != 3:
            raise FormatError(
                f"expected exactly 3 space-separated integers, found {len(tokens)} tokens",
                line=lineno,
            )
        left, right, timestamp = (
            _parse_unsigned(token, field, lineno)
            for token, field in zip(tokens, _RECORD_FIELDS)
        )

        left_index = _resolve_parent(left, ParentSide.LEFT, dag, lineno)
        right_index = _resolve_parent(right, ParentSide.RIGHT, dag, lineno)

        dag.set_timestamp(record, timestamp)
        dag.add_approval(left_index, record, ParentSide.LEFT)
        dag.add_approval(right_index, record, ParentSide.RIGHT)

    if _read_line(stream, n + 2):
        raise FormatError(
            f"expected {n} transactions only but there is trailing data", line=n + 2
        )

    logger.debug(
        "Parsed tangle with %d nodes and %d edges", dag.node_count, dag.edge_count
    )
    return dag.freeze()


def load_database(path: Union[str, Path]) -> Tangle:
    """Open ``path`` and parse it with ``parse_database``.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with Path(path).open("rb") as stream:
        return parse_database(stream)
