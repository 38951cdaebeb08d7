"""Tests for the Tangle container."""

import pytest

from tangle_stats.core.exceptions import CycleError
from tangle_stats.core.graph import Tangle
from tangle_stats.core.models import Edge, ParentSide, Transaction


def _make_tangle():
    """Helper: origin plus two transactions, the second approving the first twice."""
    dag = Tangle()
    a = dag.add_node(timestamp=0)
    b = dag.add_node(timestamp=1)
    dag.add_approval(0, a.index, ParentSide.LEFT)
    dag.add_approval(0, a.index, ParentSide.RIGHT)
    dag.add_approval(a.index, b.index, ParentSide.LEFT)
    dag.add_approval(a.index, b.index, ParentSide.RIGHT)
    return dag


class TestAddNode:
    def test_new_tangle_has_only_origin(self):
        dag = Tangle()
        assert dag.node_count == 1
        assert len(dag) == 1
        assert dag.origin.is_origin
        assert dag[0].timestamp is None

    def test_indices_follow_insertion_order(self):
        dag = Tangle()
        first = dag.add_node()
        second = dag.add_node(timestamp=7)
        assert (first.index, second.index) == (1, 2)
        assert dag[2] is second
        assert isinstance(dag[1], Transaction)

    def test_iteration_yields_transactions_in_order(self):
        dag = _make_tangle()
        assert [tx.index for tx in dag] == [0, 1, 2]


class TestSetTimestamp:
    def test_sets_value(self):
        dag = Tangle()
        tx = dag.add_node()
        dag.set_timestamp(tx.index, 5)
        assert dag[1].timestamp == 5

    def test_origin_rejected(self):
        dag = Tangle()
        with pytest.raises(ValueError, match="origin"):
            dag.set_timestamp(0, 5)


class TestAddApproval:
    def test_returns_edge(self):
        dag = Tangle()
        tx = dag.add_node()
        edge = dag.add_approval(0, tx.index, ParentSide.LEFT)
        assert edge == Edge(source=0, target=1)
        assert dag.edge_count == 1

    def test_parallel_edges_kept(self):
        dag = _make_tangle()
        assert dag.children(0) == [1, 1]
        assert dag.parents(2) == [1, 1]
        assert dag.edge_count == 4

    def test_self_approval_is_a_cycle(self):
        dag = Tangle()
        tx = dag.add_node()
        with pytest.raises(CycleError) as excinfo:
            dag.add_approval(tx.index, tx.index, ParentSide.RIGHT)
        assert excinfo.value.side is ParentSide.RIGHT
        assert (excinfo.value.parent, excinfo.value.child) == (2, 2)

    def test_back_edge_is_a_cycle(self):
        dag = _make_tangle()
        with pytest.raises(CycleError, match="left parent 3 to node 1"):
            dag.add_approval(2, 0, ParentSide.LEFT)
        assert dag.edge_count == 4

    def test_unknown_index_raises(self):
        dag = Tangle()
        with pytest.raises(IndexError, match="out of range"):
            dag.add_approval(0, 5, ParentSide.LEFT)


class TestReadAccess:
    def test_children_and_parents_are_copies(self):
        dag = _make_tangle()
        dag.children(0).append(99)
        dag.parents(1).append(99)
        assert dag.children(0) == [1, 1]
        assert dag.parents(1) == [0, 0]

    def test_neighbors_ignore_direction(self):
        dag = _make_tangle()
        assert sorted(dag.neighbors(1)) == [0, 0, 2, 2]

    def test_has_path(self):
        dag = _make_tangle()
        assert dag.has_path(0, 2)
        assert dag.has_path(1, 1)
        assert not dag.has_path(2, 0)

    def test_edges_lists_every_edge(self):
        dag = _make_tangle()
        assert dag.edges().count(Edge(source=1, target=2)) == 2


class TestFreeze:
    def test_frozen_tangle_rejects_mutation(self):
        dag = _make_tangle().freeze()
        assert dag.frozen
        with pytest.raises(RuntimeError, match="frozen"):
            dag.add_node()
        with pytest.raises(RuntimeError, match="frozen"):
            dag.add_approval(0, 2, ParentSide.LEFT)
        with pytest.raises(RuntimeError, match="frozen"):
            dag.set_timestamp(1, 3)

    def test_frozen_tangle_still_readable(self):
        dag = _make_tangle().freeze()
        assert dag.children(1) == [2, 2]
