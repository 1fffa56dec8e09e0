"""weightgraph.core: the graph contract and its two representations."""

from .edge import Edge
from .edge_list import EdgeListGraph
from .graph import Graph, empty_graph, graph_class
from .vertex import Vertex
from .vertex_list import VertexListGraph

__all__ = [
    "Edge",
    "EdgeListGraph",
    "Graph",
    "Vertex",
    "VertexListGraph",
    "empty_graph",
    "graph_class",
]
