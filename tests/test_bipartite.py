"""Tests for the bipartiteness check."""

import io

from tangle_stats.core.bipartite import is_bipartite, two_coloring
from tangle_stats.core.graph import Tangle
from tangle_stats.core.models import ParentSide
from tangle_stats.core.parser import parse_database

GOOD_DATABASE = "5\n1 1 0\n1 1 0\n2 3 1\n4 2 3\n4 3 2\n"
# 0 -> {1, 2} -> 3 -> {4, 5} -> 6: only even undirected cycles
BIPARTITE_DATABASE = "6\n1 1 0\n1 1 0\n2 3 1\n4 4 2\n4 4 2\n5 6 3\n"


def _parse(text):
    return parse_database(io.BytesIO(text.encode("utf-8")))


class TestIsBipartite:
    def test_not_bipartite(self):
        # 1 -> 3 -> 4 and 1 -> 4 form a triangle
        assert is_bipartite(_parse(GOOD_DATABASE)) is False

    def test_bipartite(self):
        assert is_bipartite(_parse(BIPARTITE_DATABASE)) is True

    def test_origin_only(self):
        assert is_bipartite(_parse("0\n")) is True

    def test_parallel_edges_do_not_matter(self):
        assert is_bipartite(_parse("2\n1 1 0\n2 2 1\n")) is True

    def test_triangle_through_origin(self):
        # 0 -> 1, 0 -> 2 and 1 -> 2
        assert is_bipartite(_parse("2\n1 1 0\n1 2 1\n")) is False

    def test_deterministic(self):
        assert is_bipartite(_parse(GOOD_DATABASE)) == is_bipartite(_parse(GOOD_DATABASE))


class TestTwoColoring:
    def test_colors_alternate_across_edges(self):
        dag = _parse(BIPARTITE_DATABASE)
        colors = two_coloring(dag)
        assert colors == [0, 1, 1, 0, 1, 1, 0]
        for edge in dag.edges():
            assert colors[edge.source] != colors[edge.target]

    def test_none_when_odd_cycle(self):
        assert two_coloring(_parse(GOOD_DATABASE)) is None

    def test_disconnected_component_is_colored(self):
        dag = Tangle()
        a = dag.add_node()
        b = dag.add_node()
        c = dag.add_node()
        dag.add_approval(0, a.index, ParentSide.LEFT)
        dag.add_approval(b.index, c.index, ParentSide.LEFT)
        assert two_coloring(dag) == [0, 1, 0, 1]
