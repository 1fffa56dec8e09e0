from __future__ import annotations

from .edge import Edge, _check_label, _check_weight
from .graph import Graph
from .vertex import Vertex


class VertexListGraph(Graph):
    """Graph stored as a list of :class:`Vertex` objects, each owning its out-arcs.

    There is no top-level edge collection: outgoing edges of ``v`` are the
    entries of ``v``'s adjacency, and incoming edges of ``t`` are found by
    scanning every vertex for an entry keyed by ``t``.

    Abstraction function
    --
    ``AF(vertices)`` is the graph whose vertex set is ``{v.label for v in vertices}``
    and which has an arc ``v.label -> t`` of weight ``w`` for every vertex ``v``
    and every ``t: w`` in ``v.targets()``.

    Representation invariant
    --
    - every element of ``vertices`` is a :class:`Vertex`
    - no two vertices share a label
    - every adjacency key of every vertex is the label of some vertex in ``vertices``
    - every adjacency weight is an ``int`` > 0 (held by :class:`Vertex` itself)

    Safety from rep exposure
    --
    ``vertices`` is private and :class:`Vertex` objects are never returned.
    Queries build new sets, dicts, and lists from the vertices' copies.

    """

    def __init__(self, history: bool = True):
        self._vertices: list[Vertex] = []
        super().__init__(history=history)
        self._check_rep()

    def _check_rep(self):
        assert isinstance(self._vertices, list), "vertices must be a list"
        labels = set()
        for v in self._vertices:
            assert isinstance(v, Vertex), "vertex must be a Vertex"
            assert v.label not in labels, f"duplicate vertex {v.label!r}"
            labels.add(v.label)
        for v in self._vertices:
            v._check_rep()
            for t in v.targets():
                assert t in labels, f"edge target {t!r} of {v.label!r} not a vertex"

    def _find(self, label):
        for v in self._vertices:
            if v.label == label:
                return v
        return None

    def _find_or_create(self, label):
        v = self._find(label)
        if v is None:
            v = Vertex(label)
            self._vertices.append(v)
        return v

    def add(self, label: str) -> bool:
        _check_label(label)
        if self._find(label) is not None:
            self._check_rep()
            return False
        self._vertices.append(Vertex(label))
        self._check_rep()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        _check_label(source, "source")
        _check_label(target, "target")
        weight = _check_weight(weight)

        if weight > 0:
            s = self._find_or_create(source)
            self._find_or_create(target)
            previous = s.set_target(target, weight)
        else:
            s = self._find(source)
            previous = s.remove_target(target) if s is not None else 0

        self._check_rep()
        return previous

    def remove(self, label: str) -> bool:
        _check_label(label)
        v = self._find(label)
        if v is None:
            self._check_rep()
            return False
        self._vertices.remove(v)
        # incoming arcs live on the other vertices
        for other in self._vertices:
            other.remove_target(label)
        self._check_rep()
        return True

    def vertices(self) -> set[str]:
        return {v.label for v in self._vertices}

    def sources(self, target: str) -> dict[str, int]:
        _check_label(target, "target")
        result = {}
        for v in self._vertices:
            w = v.target_weight(target)
            if w > 0:
                result[v.label] = w
        return result

    def targets(self, source: str) -> dict[str, int]:
        _check_label(source, "source")
        v = self._find(source)
        return v.targets() if v is not None else {}

    def edges(self) -> list[Edge]:
        return [Edge(v.label, t, w) for v in self._vertices for t, w in v.targets().items()]
