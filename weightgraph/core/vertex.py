from __future__ import annotations

from .edge import _check_label, _check_weight


class Vertex:
    """A named vertex owning its outgoing adjacency.

    Parameters
    --
    label : str
        Vertex label, fixed for the lifetime of the object.

    Notes
    -
    Abstraction function: ``AF(label, adjacency)`` is the vertex ``label``
    together with one outgoing arc ``label -> t`` of weight ``w`` for every
    entry ``t: w`` of ``adjacency``.

    Representation invariant: ``label`` is a non-empty ``str``; every key of
    ``adjacency`` is a non-empty ``str`` and every value an ``int`` > 0.

    Safety from rep exposure: ``adjacency`` is a private dict owned by this
    vertex alone. :meth:`targets` returns a copy, and the only mutators are
    :meth:`set_target` and :meth:`remove_target`.

    """

    __slots__ = ("_label", "_adjacency")

    def __init__(self, label: str):
        self._label = _check_label(label)
        self._adjacency: dict[str, int] = {}
        self._check_rep()

    def _check_rep(self):
        assert isinstance(self._label, str) and self._label, "vertex label must be set"
        for t, w in self._adjacency.items():
            assert isinstance(t, str) and t, "adjacency key must be a label"
            assert type(w) is int and w > 0, "adjacency weight must be > 0"

    @property
    def label(self) -> str:
        return self._label

    def targets(self) -> dict[str, int]:
        """Copy of the outgoing adjacency ``{target: weight}``."""
        return dict(self._adjacency)

    def target_weight(self, target: str) -> int:
        """Weight of the arc to ``target``, or 0 if there is none."""
        return self._adjacency.get(target, 0)

    def has_target(self, target: str) -> bool:
        return target in self._adjacency

    def set_target(self, target: str, weight: int) -> int:
        """Insert or overwrite the arc to ``target``.

        Returns
        ---
        int
            The previous weight, or 0 if the arc did not exist.

        Raises
        --
        ValueError
            If ``weight`` is not strictly positive.

        """
        _check_label(target, "target")
        weight = _check_weight(weight)
        if weight == 0:
            raise ValueError("use remove_target() to drop an arc")
        previous = self._adjacency.get(target, 0)
        self._adjacency[target] = weight
        self._check_rep()
        return previous

    def remove_target(self, target: str) -> int:
        """Drop the arc to ``target``; return its weight (0 if absent)."""
        previous = self._adjacency.pop(target, 0)
        self._check_rep()
        return previous

    def __len__(self):
        return len(self._adjacency)

    def __repr__(self):
        return f"Vertex({self._label!r}, targets={self._adjacency!r})"
