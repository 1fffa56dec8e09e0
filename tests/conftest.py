"""Shared fixtures and helpers for graph tests."""

import pathlib
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from weightgraph.core.graph import empty_graph  # noqa: E402

KINDS = ["edges", "vertices"]

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture(params=KINDS)
def graph_factory(request):
    """Callable returning a new empty graph; runs once per representation."""

    def make(**kwargs):
        return empty_graph(request.param, **kwargs)

    make.kind = request.param
    return make


@pytest.fixture
def small_graph(graph_factory):
    """A -> B (3), A -> C (1), C -> A (2), C -> C (4), plus isolated D."""
    G = graph_factory()
    G.set("A", "B", 3)
    G.set("A", "C", 1)
    G.set("C", "A", 2)
    G.set("C", "C", 4)
    G.add("D")
    return G


@pytest.fixture
def tmpdir_fixture():
    """Temporary directory for history export tests."""
    tmpdir = Path(tempfile.mkdtemp())
    yield tmpdir
    shutil.rmtree(tmpdir)


# ======================================================================
# HELPERS
# ======================================================================


def assert_graphs_equal(G1, G2):
    """Assert two graphs (any representation) hold the same abstract value."""
    assert G1.vertices() == G2.vertices(), "Vertex sets differ"
    for v in G1.vertices():
        assert G1.targets(v) == G2.targets(v), f"targets({v!r}) differ"
        assert G1.sources(v) == G2.sources(v), f"sources({v!r}) differ"


def edge_map(G):
    return {e.pair: e.weight for e in G.edges()}
