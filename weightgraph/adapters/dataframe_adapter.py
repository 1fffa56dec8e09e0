from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any

import narwhals as nw
import polars as pl
from narwhals.typing import IntoDataFrame

from ._utils import _coerce_weight

if TYPE_CHECKING:
    from ..core.graph import Graph


def to_dataframe(graph: Graph) -> dict[str, pl.DataFrame]:
    """Export a graph to Polars DataFrames.

    Returns
    -------
    dict[str, polars.DataFrame]
        ``'vertices'``: one ``vertex_id`` row per vertex (isolated ones included);
        ``'edges'``: ``source``, ``target``, ``weight`` rows, sorted by pair.

    """
    ids = sorted(graph.vertices())
    return {
        "vertices": pl.DataFrame({"vertex_id": ids}, schema={"vertex_id": pl.Utf8}),
        "edges": graph.edges_view(),
    }


def _label(value) -> str | None:
    # null and empty cells carry no label
    if value is None or (isinstance(value, float) and value != value):
        return None
    label = str(value)
    return label or None


def _to_dicts(df: nw.DataFrame[Any]) -> list[dict[str, Any]]:
    """Convert narwhals DataFrame to list of dicts."""
    return [dict(zip(df.columns, row)) for row in df.rows()]


def from_dataframe(
    edges: IntoDataFrame | None = None,
    vertices: IntoDataFrame | None = None,
    *,
    kind: str = "edges",
    graph: Graph | None = None,
    default_weight: int = 1,
) -> Graph:
    """Build a graph from edge (and optional vertex) tables.

    Any eager DataFrame narwhals understands (Polars, pandas, PyArrow) is accepted.

    Args:
        edges: Table with ``source`` and ``target`` columns and an optional
            ``weight`` column (missing or null -> ``default_weight``).
        vertices: Table with a ``vertex_id`` column; adds isolated vertices.
        kind: Representation to build when ``graph`` is None.
        graph: Existing graph to load into.
        default_weight: Weight for rows without one.

    Returns:
        The populated graph.

    Raises:
        ValueError: If a required column is missing.

    Notes:
        Rows are applied in order through ``set``, so a later row for the same
        pair overwrites an earlier one and a weight of 0 removes the edge.
        Rows with a null or empty endpoint, or a negative or non-numeric weight,
        are skipped with a warning, as are null or empty vertex ids. Non-integral
        weights are rounded to int with a warning.

    """
    from ..core.graph import empty_graph

    H = graph if graph is not None else empty_graph(kind)

    if vertices is not None:
        vertices_nw = nw.from_native(vertices, eager_only=True)
        if "vertex_id" not in vertices_nw.columns:
            raise ValueError("vertices table must have a 'vertex_id' column")
        missing = 0
        for vid in vertices_nw["vertex_id"].to_list():
            label = _label(vid)
            if label is None:
                missing += 1
                continue
            H.add(label)
        if missing:
            warnings.warn(
                f"from_dataframe: skipped {missing} null or empty vertex id(s)",
                UserWarning,
                stacklevel=2,
            )

    if edges is not None:
        edges_nw = nw.from_native(edges, eager_only=True)
        if "source" not in edges_nw.columns or "target" not in edges_nw.columns:
            raise ValueError("edges table must have 'source' and 'target' columns")
        has_weight = "weight" in edges_nw.columns
        skipped = 0
        rounded = 0
        for row in _to_dicts(edges_nw):
            source, target = _label(row["source"]), _label(row["target"])
            raw = row.get("weight") if has_weight else None
            w = default_weight if raw is None else _coerce_weight(raw)
            if source is None or target is None or w is None or w < 0:
                skipped += 1
                continue
            if raw is not None and w != raw:
                rounded += 1
            H.set(source, target, w)
        if skipped:
            warnings.warn(
                f"from_dataframe: skipped {skipped} row(s) with a missing endpoint or an invalid weight",
                UserWarning,
                stacklevel=2,
            )
        if rounded:
            warnings.warn(
                f"from_dataframe: rounded {rounded} non-integral weight(s) to int",
                UserWarning,
                stacklevel=2,
            )

    return H
