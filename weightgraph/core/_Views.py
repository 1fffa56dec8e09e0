import numpy as np
import polars as pl
import scipy.sparse as sp


class Views:
    """Read-only tabular and matrix views built from the public graph contract.

    Every view is computed fresh from :meth:`vertices` and :meth:`edges`, so
    it never aliases the representation's private state.
    """

    def edges_view(self):
        """Polars DF [DataFrame] of edges.

        Returns
        ---
        polars.DataFrame
            Columns ``source`` (Utf8), ``target`` (Utf8), ``weight`` (Int64),
            one row per edge, sorted by ``(source, target)``.

        """
        rows = sorted(self.edges(), key=lambda e: e.pair)
        return pl.DataFrame(
            {
                "source": [e.source for e in rows],
                "target": [e.target for e in rows],
                "weight": [e.weight for e in rows],
            },
            schema={"source": pl.Utf8, "target": pl.Utf8, "weight": pl.Int64},
        )

    def vertices_view(self):
        """Polars DF of vertices with their in/out degree.

        Returns
        ---
        polars.DataFrame
            Columns ``vertex_id``, ``in_degree``, ``out_degree``, sorted by
            ``vertex_id``. A self-loop counts once in each degree.

        """
        ids = sorted(self.vertices())
        indeg = dict.fromkeys(ids, 0)
        outdeg = dict.fromkeys(ids, 0)
        for e in self.edges():
            outdeg[e.source] += 1
            indeg[e.target] += 1
        return pl.DataFrame(
            {
                "vertex_id": ids,
                "in_degree": [indeg[v] for v in ids],
                "out_degree": [outdeg[v] for v in ids],
            },
            schema={"vertex_id": pl.Utf8, "in_degree": pl.Int64, "out_degree": pl.Int64},
        )

    def adjacency_matrix(self, order=None):
        """Weighted adjacency matrix in CSR (Compressed Sparse Row) format.

        Parameters
        --
        order : list[str], optional
            Row/column order. Must be a permutation of the vertex set.
            Defaults to the sorted vertex labels.

        Returns
        ---
        tuple[scipy.sparse.csr_matrix, list[str]]
            ``A[i, j]`` is the weight of edge ``order[i] -> order[j]`` (0 if none).

        Raises
        --
        ValueError
            If ``order`` is not a permutation of the vertex set.

        """
        vertices = self.vertices()
        if order is None:
            order = sorted(vertices)
        else:
            order = list(order)
            if len(order) != len(vertices) or set(order) != vertices:
                raise ValueError("order must list every vertex exactly once")
        idx = {v: i for i, v in enumerate(order)}
        edges = self.edges()
        rows = np.fromiter((idx[e.source] for e in edges), dtype=np.int64, count=len(edges))
        cols = np.fromiter((idx[e.target] for e in edges), dtype=np.int64, count=len(edges))
        vals = np.fromiter((e.weight for e in edges), dtype=np.int64, count=len(edges))
        n = len(order)
        A = sp.coo_matrix((vals, (rows, cols)), shape=(n, n), dtype=np.int64).tocsr()
        return A, order
