# Tests specific to VertexListGraph and the Vertex type.
#
# Testing strategy
#
# Vertex: construction, set / update / remove targets, copies out,
#         rejected labels and weights
# VertexListGraph: target vertex created without out-arcs, rendering,
#         corrupted representation trips the invariant check

import pytest

from weightgraph.core.graph import Graph
from weightgraph.core.vertex import Vertex
from weightgraph.core.vertex_list import VertexListGraph


class TestVertex:
    @pytest.mark.parametrize("label", [None, ""])
    def test_rejects_bad_label(self, label):
        with pytest.raises(ValueError):
            Vertex(label)

    def test_label_is_read_only(self):
        v = Vertex("V")
        with pytest.raises(AttributeError):
            v.label = "W"

    def test_target_operations(self):
        v = Vertex("V")
        assert v.set_target("A", 4) == 0
        assert v.set_target("B", 5) == 0
        assert v.targets() == {"A": 4, "B": 5}
        assert v.target_weight("A") == 4
        assert v.has_target("B")
        assert len(v) == 2
        # update weight
        assert v.set_target("A", 6) == 4
        assert v.target_weight("A") == 6
        # remove
        assert v.remove_target("A") == 6
        assert v.target_weight("A") == 0
        assert v.remove_target("A") == 0
        assert v.targets() == {"B": 5}

    def test_targets_is_a_copy(self):
        v = Vertex("V")
        v.set_target("A", 1)
        t = v.targets()
        t["A"] = 99
        t["B"] = 1
        assert v.targets() == {"A": 1}

    @pytest.mark.parametrize("weight", [0, -3])
    def test_set_target_rejects_non_positive(self, weight):
        v = Vertex("V")
        with pytest.raises(ValueError):
            v.set_target("A", weight)
        assert v.targets() == {}

    def test_vertices_do_not_share_adjacency(self):
        a, b = Vertex("A"), Vertex("B")
        a.set_target("C", 1)
        assert b.targets() == {}


class TestVertexListGraph:
    def test_is_a_graph(self):
        assert isinstance(VertexListGraph(), Graph)

    def test_target_created_without_out_arcs(self):
        G = VertexListGraph()
        G.set("A", "B", 2)
        assert G.targets("B") == {}
        assert G.sources("B") == {"A": 2}

    def test_sources_scans_every_vertex(self):
        G = VertexListGraph()
        for i, s in enumerate("PQRS", start=1):
            G.set(s, "T", i)
        assert G.sources("T") == {"P": 1, "Q": 2, "R": 3, "S": 4}

    def test_str_with_edges(self):
        G = VertexListGraph()
        G.set("P", "Q", 2)
        G.set("P", "R", 3)
        s = str(G)
        assert "Vertices" in s
        assert "Edges" in s
        assert "P -> Q (2)" in s
        assert "P -> R (3)" in s

    def test_edges_are_fresh_values(self):
        G = VertexListGraph()
        G.set("A", "B", 1)
        assert G.edges() == G.edges()
        assert G.edges()[0] is not G.edges()[0]


class TestVertexListInvariant:
    def test_duplicate_label_detected(self):
        G = VertexListGraph()
        G.add("A")
        G._vertices.append(Vertex("A"))
        with pytest.raises(AssertionError):
            G.add("B")

    def test_dangling_target_detected(self):
        G = VertexListGraph()
        G.add("A")
        G._vertices[0].set_target("ghost", 1)
        with pytest.raises(AssertionError):
            G.set("A", "B", 1)

    def test_non_positive_adjacency_detected(self):
        G = VertexListGraph()
        G.set("A", "B", 1)
        G._vertices[0]._adjacency["B"] = 0
        with pytest.raises(AssertionError):
            G.remove("zzz")
