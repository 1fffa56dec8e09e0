from __future__ import annotations

from .edge import Edge, _check_label, _check_weight
from .graph import Graph


class EdgeListGraph(Graph):
    """Graph stored as a set of vertex labels plus a list of :class:`Edge` values.

    Abstraction function
    --
    ``AF(vertices, edges)`` is the graph whose vertex set is ``vertices`` and
    which has an arc ``e.source -> e.target`` of weight ``e.weight`` for every
    ``e`` in ``edges``.

    Representation invariant
    --
    - every element of ``vertices`` is a non-empty ``str``
    - every ``e`` in ``edges`` is an :class:`Edge` with ``e.weight > 0``
    - ``e.source`` and ``e.target`` are in ``vertices`` for every ``e``
    - no two edges share the same ``(source, target)`` pair

    Safety from rep exposure
    --
    ``vertices`` and ``edges`` are private and never returned. Queries build new
    sets, dicts, and lists; :class:`Edge` values are immutable so handing them
    out in :meth:`edges` cannot change the graph.

    """

    def __init__(self, history: bool = True):
        self._vertices: set[str] = set()
        self._edges: list[Edge] = []
        super().__init__(history=history)
        self._check_rep()

    def _check_rep(self):
        assert isinstance(self._vertices, set), "vertices must be a set"
        assert isinstance(self._edges, list), "edges must be a list"
        for v in self._vertices:
            assert isinstance(v, str) and v, "vertex label must be a non-empty str"
        seen = set()
        for e in self._edges:
            assert isinstance(e, Edge), "edge must be an Edge"
            assert e.weight > 0, "edge weight must be > 0"
            assert e.source in self._vertices, f"edge source {e.source!r} not a vertex"
            assert e.target in self._vertices, f"edge target {e.target!r} not a vertex"
            assert e.pair not in seen, f"duplicate edge {e.source!r} -> {e.target!r}"
            seen.add(e.pair)

    def _find(self, source, target):
        for e in self._edges:
            if e.source == source and e.target == target:
                return e
        return None

    def add(self, label: str) -> bool:
        _check_label(label)
        if label in self._vertices:
            self._check_rep()
            return False
        self._vertices.add(label)
        self._check_rep()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        _check_label(source, "source")
        _check_label(target, "target")
        weight = _check_weight(weight)

        found = self._find(source, target)
        previous = found.weight if found is not None else 0

        if weight > 0:
            self._vertices.add(source)
            self._vertices.add(target)
            if found is not None:
                self._edges.remove(found)
            self._edges.append(Edge(source, target, weight))
        elif found is not None:
            self._edges.remove(found)

        self._check_rep()
        return previous

    def remove(self, label: str) -> bool:
        _check_label(label)
        if label not in self._vertices:
            self._check_rep()
            return False
        self._vertices.discard(label)
        self._edges = [e for e in self._edges if not e.touches(label)]
        self._check_rep()
        return True

    def vertices(self) -> set[str]:
        return set(self._vertices)

    def sources(self, target: str) -> dict[str, int]:
        _check_label(target, "target")
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: str) -> dict[str, int]:
        _check_label(source, "source")
        return {e.target: e.weight for e in self._edges if e.source == source}

    def edges(self) -> list[Edge]:
        return list(self._edges)
