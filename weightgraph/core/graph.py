from __future__ import annotations

from abc import ABC, abstractmethod

from ._GraphDiff import Snapshots
from ._History import History
from ._Views import Views
from .edge import Edge

# ===================================


class Graph(History, Snapshots, Views, ABC):
    """Mutable directed graph with labeled vertices and positive integer weights.

    This is the contract shared by every representation. A graph is a set of
    vertex labels plus at most one weighted arc per ordered ``(source, target)``
    pair, where both endpoints are always in the vertex set.

    Parameters
    --
    history : bool, optional
        Record successful mutations in the in-memory history (default True).

    Notes
    -
    - Labels are non-empty ``str``; equality is exact.
    - ``set(source, target, 0)`` removes an edge; weight 0 is never stored.
    - Every query returns a fresh copy; mutating a result never touches the graph,
      and later graph mutations never show up in an earlier result.
    - Representations check their invariant after every mutation with ``assert``;
      a failed check is a bug in the representation and is never caught here.

    See Also

    EdgeListGraph, VertexListGraph, empty_graph

    """

    def __init__(self, history: bool = True):
        self._init_history(history)
        self._init_snapshots()

    # Contract

    @abstractmethod
    def add(self, label: str) -> bool:
        """Add a vertex.

        Parameters
        --
        label : str

        Returns
        ---
        bool
            True if the vertex was added, False if it was already present
            (the graph is unchanged).

        Raises
        --
        ValueError
            If ``label`` is None or empty.
        TypeError
            If ``label`` is not a ``str``.

        """

    @abstractmethod
    def set(self, source: str, target: str, weight: int) -> int:
        """Add, change, or remove the edge ``source -> target``.

        Parameters
        --
        source, target : str
            Endpoints; may be equal (self-loop).
        weight : int
            Nonnegative. If positive, the edge is inserted or overwritten and any
            missing endpoint is added as a vertex. If zero, the edge is removed if
            present; vertices are neither added nor removed.

        Returns
        ---
        int
            The weight the edge had before the call, or 0 if it did not exist.

        Raises
        --
        ValueError
            If a label is None or empty, or ``weight`` is negative.
        TypeError
            If a label is not a ``str`` or ``weight`` is not an integer.

        """

    @abstractmethod
    def remove(self, label: str) -> bool:
        """Remove a vertex and every edge into or out of it.

        Returns
        ---
        bool
            True if the vertex was present and removed, False otherwise
            (the graph is unchanged).

        """

    @abstractmethod
    def vertices(self) -> set[str]:
        """Snapshot of the vertex labels."""

    @abstractmethod
    def sources(self, target: str) -> dict[str, int]:
        """Snapshot ``{source: weight}`` of every edge into ``target``.

        Empty if ``target`` has no incoming edges or is not a vertex.
        """

    @abstractmethod
    def targets(self, source: str) -> dict[str, int]:
        """Snapshot ``{target: weight}`` of every edge out of ``source``.

        Empty if ``source`` has no outgoing edges or is not a vertex.
        """

    @abstractmethod
    def edges(self) -> list[Edge]:
        """Snapshot of every edge as immutable :class:`Edge` values."""

    # Derived queries

    def number_of_vertices(self) -> int:
        return len(self.vertices())

    def number_of_edges(self) -> int:
        return len(self.edges())

    def has_vertex(self, label: str) -> bool:
        return label in self.vertices()

    def has_edge(self, source: str, target: str) -> bool:
        return target in self.targets(source)

    def weight(self, source: str, target: str) -> int:
        """Weight of ``source -> target``, or 0 if there is no such edge."""
        return self.targets(source).get(target, 0)

    def __len__(self):
        return self.number_of_vertices()

    def __contains__(self, label):
        return self.has_vertex(label)

    def __iter__(self):
        return iter(sorted(self.vertices()))

    def _abstract_value(self):
        return self.vertices(), {e.pair: e.weight for e in self.edges()}

    def __eq__(self, other):
        """Graphs are equal when their abstract values are, whatever the representation."""
        if not isinstance(other, Graph):
            return NotImplemented
        return self._abstract_value() == other._abstract_value()

    # mutable, so not hashable
    __hash__ = None

    def copy(self, kind=None, history: bool = False) -> Graph:
        """Independent copy with the same vertices and edges.

        Parameters
        --
        kind : str, optional
            Representation of the copy (see :func:`empty_graph`). Defaults to
            the representation of this graph.
        history : bool, default False
            Whether the copy records its own mutation history. The history of
            this graph is never carried over.

        """
        out = type(self)(history=history) if kind is None else empty_graph(kind, history=history)
        for v in sorted(self.vertices()):
            out.add(v)
        for e in self.edges():
            out.set(e.source, e.target, e.weight)
        return out

    # copies get their own instance-bound history hooks
    def __copy__(self):
        return self.copy(history=self._history_enabled)

    def __deepcopy__(self, memo):
        out = self.copy(history=self._history_enabled)
        memo[id(self)] = out
        return out

    # Rendering

    def __str__(self):
        """``Vertices: [A, B]`` then ``Edges:`` and one ``  A -> B (3)`` line per edge.

        The vertex list is sorted; edge lines follow the representation's own
        iteration order.
        """
        lines = [f"Vertices: [{', '.join(sorted(self.vertices()))}]", "Edges:"]
        lines.extend(f"  {e}" for e in self.edges())
        return "\n".join(lines) + "\n"

    def __repr__(self):
        return (
            f"{type(self).__name__}(vertices={self.number_of_vertices()}, "
            f"edges={self.number_of_edges()})"
        )


_KINDS = {
    "edges": "EdgeListGraph",
    "edge_list": "EdgeListGraph",
    "vertices": "VertexListGraph",
    "vertex_list": "VertexListGraph",
}


def graph_class(kind: str):
    """Resolve a representation name to its class.

    ``"edges"``/``"edge_list"`` -> :class:`EdgeListGraph`,
    ``"vertices"``/``"vertex_list"`` -> :class:`VertexListGraph`.
    """
    try:
        name = _KINDS[kind]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown graph kind {kind!r}; expected one of {sorted(_KINDS)}")
    if name == "EdgeListGraph":
        from .edge_list import EdgeListGraph

        return EdgeListGraph
    from .vertex_list import VertexListGraph

    return VertexListGraph


def empty_graph(kind: str = "edges", **kwargs) -> Graph:
    """Construct an empty graph of the requested representation."""
    return graph_class(kind)(**kwargs)
