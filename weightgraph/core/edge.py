from __future__ import annotations

from numbers import Integral


def _check_label(label, name="label"):
    """Validate a vertex label.

    Raises
    --
    ValueError
        If ``label`` is None or the empty string.
    TypeError
        If ``label`` is not a ``str``.

    """
    if label is None:
        raise ValueError(f"{name} must not be None")
    if not isinstance(label, str):
        raise TypeError(f"{name} must be a str, got {type(label).__name__}")
    if not label:
        raise ValueError(f"{name} must not be empty")
    return label


def _check_weight(weight, name="weight"):
    """Validate an edge weight and normalize it to ``int``.

    Zero is accepted here (it is the removal signal of ``set``); callers that
    need a strictly positive weight check that themselves.

    """
    if weight is None:
        raise ValueError(f"{name} must not be None")
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise TypeError(f"{name} must be an int, got {type(weight).__name__}")
    weight = int(weight)
    if weight < 0:
        raise ValueError(f"{name} must be nonnegative, got {weight}")
    return weight


class Edge:
    """Immutable directed edge ``source -> target`` with a positive weight.

    Parameters
    --
    source : str
        Label of the tail vertex.
    target : str
        Label of the head vertex.
    weight : int
        Strictly positive weight.

    Notes
    -
    Abstraction function: ``AF(source, target, weight)`` is the arc from
    ``source`` to ``target`` carrying ``weight``.

    Representation invariant: both labels are non-empty ``str``, ``weight``
    is an ``int`` greater than zero.

    Safety from rep exposure: all fields are immutable and set once; there
    is no mutator, so "updating" an edge means building a new one
    (see :meth:`with_weight`).

    """

    __slots__ = ("_source", "_target", "_weight")

    def __init__(self, source: str, target: str, weight: int):
        _check_label(source, "source")
        _check_label(target, "target")
        weight = _check_weight(weight)
        if weight == 0:
            raise ValueError("edge weight must be > 0")
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_weight", weight)
        self._check_rep()

    def _check_rep(self):
        assert isinstance(self._source, str) and self._source, "edge source must be a label"
        assert isinstance(self._target, str) and self._target, "edge target must be a label"
        assert type(self._weight) is int and self._weight > 0, "edge weight must be > 0"

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Edge, (self._source, self._target, self._weight))

    @property
    def source(self) -> str:
        return self._source

    @property
    def target(self) -> str:
        return self._target

    @property
    def weight(self) -> int:
        return self._weight

    @property
    def pair(self) -> tuple[str, str]:
        """The ordered ``(source, target)`` key of this edge."""
        return (self._source, self._target)

    def is_loop(self) -> bool:
        return self._source == self._target

    def touches(self, label: str) -> bool:
        """True if ``label`` is either endpoint."""
        return self._source == label or self._target == label

    def with_weight(self, weight: int) -> Edge:
        """Return a new edge over the same pair carrying ``weight``."""
        return Edge(self._source, self._target, weight)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self._source, self._target, self._weight) == (
            other._source,
            other._target,
            other._weight,
        )

    def __hash__(self):
        return hash((self._source, self._target, self._weight))

    def __iter__(self):
        # allows ``s, t, w = edge``
        return iter((self._source, self._target, self._weight))

    def __repr__(self):
        return f"Edge({self._source!r}, {self._target!r}, {self._weight})"

    def __str__(self):
        return f"{self._source} -> {self._target} ({self._weight})"
