from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install weightgraph[networkx]"
    ) from e

import warnings
from typing import TYPE_CHECKING

from ._utils import _coerce_weight

if TYPE_CHECKING:
    from ..core.graph import Graph


def to_nx(graph: Graph, *, weight_attr: str = "weight") -> nx.DiGraph:
    """Export a graph to a ``networkx.DiGraph``.

    Parameters
    ----------
    graph : Graph
        Source graph, any representation.
    weight_attr : str
        Edge attribute that receives the integer weight.

    Returns
    -------
    networkx.DiGraph
        Independent of ``graph``; isolated vertices are kept.

    """
    nxG = nx.DiGraph()
    nxG.add_nodes_from(sorted(graph.vertices()))
    nxG.add_edges_from((e.source, e.target, {weight_attr: e.weight}) for e in graph.edges())
    return nxG


def from_nx(
    nxG,
    *,
    kind: str = "edges",
    graph: Graph | None = None,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Graph:
    """Build a graph from a NetworkX graph.

    Parameters
    ----------
    nxG : networkx.Graph
        Any NetworkX graph. Nodes are converted with ``str``. Undirected edges
        contribute one arc in each direction; parallel edges of a multigraph
        collapse onto one arc (the last one seen wins).
    kind : str
        Representation to build (see ``empty_graph``). Ignored if ``graph`` is given.
    graph : Graph, optional
        Existing graph to load into.
    weight_attr : str
        Edge attribute holding the weight. Missing -> ``default_weight``.
    default_weight : int

    Returns
    -------
    Graph

    Notes
    -----
    Non-integral weights are rounded and non-positive weights are skipped;
    both emit a ``UserWarning``.

    """
    from ..core.graph import empty_graph

    H = graph if graph is not None else empty_graph(kind)

    for v in nxG.nodes():
        H.add(str(v))

    rounded = skipped = 0
    directed = nxG.is_directed()
    for u, v, d in nxG.edges(data=True):
        raw = (d or {}).get(weight_attr, default_weight)
        w = _coerce_weight(raw)
        if w is None:
            skipped += 1
            continue
        if w != raw:
            rounded += 1
        if w <= 0:
            skipped += 1
            continue
        H.set(str(u), str(v), w)
        if not directed:
            H.set(str(v), str(u), w)

    if rounded:
        warnings.warn(
            f"from_nx: rounded {rounded} non-integral weight(s) to int", UserWarning, stacklevel=2
        )
    if skipped:
        warnings.warn(
            f"from_nx: skipped {skipped} edge(s) with non-positive or invalid weight",
            UserWarning,
            stacklevel=2,
        )
    return H
