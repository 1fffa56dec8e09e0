import warnings

import pytest

nx = pytest.importorskip("networkx")

from conftest import assert_graphs_equal  # noqa: E402
from weightgraph.adapters.networkx_adapter import from_nx, to_nx  # noqa: E402
from weightgraph.core.edge_list import EdgeListGraph  # noqa: E402
from weightgraph.core.vertex_list import VertexListGraph  # noqa: E402


class TestToNx:
    def test_structure(self, small_graph):
        nxG = to_nx(small_graph)
        assert isinstance(nxG, nx.DiGraph)
        assert set(nxG.nodes()) == {"A", "B", "C", "D"}
        assert nxG["A"]["B"]["weight"] == 3
        assert nxG.has_edge("C", "C")
        assert nxG.number_of_edges() == 4

    def test_detached(self, small_graph):
        nxG = to_nx(small_graph)
        nxG.remove_node("A")
        assert "A" in small_graph

    def test_custom_weight_attr(self, small_graph):
        nxG = to_nx(small_graph, weight_attr="w")
        assert nxG["C"]["A"] == {"w": 2}


class TestFromNx:
    @pytest.mark.parametrize("kind", ["edges", "vertices"])
    def test_round_trip(self, small_graph, kind):
        H = from_nx(to_nx(small_graph), kind=kind)
        assert_graphs_equal(small_graph, H)

    def test_kind_selects_representation(self):
        nxG = nx.DiGraph([("a", "b")])
        assert isinstance(from_nx(nxG), EdgeListGraph)
        assert isinstance(from_nx(nxG, kind="vertices"), VertexListGraph)

    def test_missing_weight_defaults(self):
        H = from_nx(nx.DiGraph([("a", "b")]), default_weight=2)
        assert H.targets("a") == {"b": 2}

    def test_undirected_gives_both_directions(self):
        g = nx.Graph()
        g.add_edge("a", "b", weight=4)
        H = from_nx(g)
        assert H.targets("a") == {"b": 4}
        assert H.targets("b") == {"a": 4}

    def test_non_string_nodes_are_stringified(self):
        H = from_nx(nx.DiGraph([(1, 2)]))
        assert H.vertices() == {"1", "2"}

    def test_loads_into_existing_graph(self):
        G = VertexListGraph()
        G.add("z")
        out = from_nx(nx.DiGraph([("a", "b")]), graph=G)
        assert out is G
        assert G.vertices() == {"z", "a", "b"}

    def test_rounds_float_weights_with_warning(self):
        g = nx.DiGraph()
        g.add_edge("a", "b", weight=2.6)
        g.add_edge("a", "c", weight=3.0)
        with pytest.warns(UserWarning, match="rounded 1"):
            H = from_nx(g)
        assert H.targets("a") == {"b": 3, "c": 3}

    def test_skips_non_positive_weights_with_warning(self):
        g = nx.DiGraph()
        g.add_edge("a", "b", weight=0)
        g.add_edge("a", "c", weight=-2)
        g.add_edge("a", "d", weight=float("nan"))
        g.add_edge("a", "e", weight=1)
        with pytest.warns(UserWarning, match="skipped 3"):
            H = from_nx(g)
        assert H.targets("a") == {"e": 1}
        # endpoints still exist as nodes of the source graph
        assert H.vertices() == {"a", "b", "c", "d", "e"}

    def test_clean_input_does_not_warn(self, small_graph):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            from_nx(to_nx(small_graph))
