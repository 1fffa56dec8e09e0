from datetime import UTC, datetime


class GraphDiff:
    """Represents the difference between two graph states.

    Attributes
    --
    vertices_added : set
        Vertices in b but not in a
    vertices_removed : set
        Vertices in a but not in b
    edges_added : set
        ``(source, target)`` pairs in b but not in a
    edges_removed : set
        ``(source, target)`` pairs in a but not in b
    edges_reweighted : dict
        ``(source, target) -> (weight_a, weight_b)`` for pairs in both whose weight changed

    """

    def __init__(self, snapshot_a, snapshot_b):
        self.snapshot_a = snapshot_a
        self.snapshot_b = snapshot_b

        edges_a = snapshot_a["edges"]
        edges_b = snapshot_b["edges"]

        self.vertices_added = snapshot_b["vertex_ids"] - snapshot_a["vertex_ids"]
        self.vertices_removed = snapshot_a["vertex_ids"] - snapshot_b["vertex_ids"]
        self.edges_added = set(edges_b) - set(edges_a)
        self.edges_removed = set(edges_a) - set(edges_b)
        self.edges_reweighted = {
            pair: (edges_a[pair], edges_b[pair])
            for pair in set(edges_a) & set(edges_b)
            if edges_a[pair] != edges_b[pair]
        }

    def summary(self):
        """Human-readable summary of differences."""
        lines = [
            f"Diff: {self.snapshot_a['label']} - {self.snapshot_b['label']}",
            "",
            f"Vertices: {len(self.vertices_added):+d} added, {len(self.vertices_removed)} removed",
            f"Edges: {len(self.edges_added):+d} added, {len(self.edges_removed)} removed, "
            f"{len(self.edges_reweighted)} reweighted",
        ]
        return "\n".join(lines)

    def is_empty(self):
        """Check if there are no differences."""
        return (
            not self.vertices_added
            and not self.vertices_removed
            and not self.edges_added
            and not self.edges_removed
            and not self.edges_reweighted
        )

    def __repr__(self):
        return self.summary()

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {
            "snapshot_a": self.snapshot_a["label"],
            "snapshot_b": self.snapshot_b["label"],
            "vertices_added": sorted(self.vertices_added),
            "vertices_removed": sorted(self.vertices_removed),
            "edges_added": [list(p) for p in sorted(self.edges_added)],
            "edges_removed": [list(p) for p in sorted(self.edges_removed)],
            "edges_reweighted": [
                [s, t, wa, wb] for (s, t), (wa, wb) in sorted(self.edges_reweighted.items())
            ],
        }


class Snapshots:
    # Audit

    def _init_snapshots(self):
        self._snapshots = []

    def _state(self, label):
        return {
            "label": label,
            "version": getattr(self, "_version", 0),
            "vertex_ids": self.vertices(),
            "edges": {e.pair: e.weight for e in self.edges()},
        }

    def snapshot(self, label=None):
        """Create a named snapshot of current graph state.

        Parameters
        --
        label : str, optional
            Human-readable label for snapshot (auto-generated if None)

        Returns
        ---
        dict
            Snapshot metadata plus the captured vertex set and edge map.
            The captured state is a copy; later mutations do not affect it.

        """
        if label is None:
            label = f"snapshot_{len(self._snapshots)}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

        snap = self._state(label)
        snap["timestamp"] = datetime.now(UTC).isoformat()
        snap["counts"] = {"vertices": len(snap["vertex_ids"]), "edges": len(snap["edges"])}
        self._snapshots.append(snap)
        return {
            **snap,
            "vertex_ids": set(snap["vertex_ids"]),
            "edges": dict(snap["edges"]),
            "counts": dict(snap["counts"]),
        }

    def diff(self, a, b=None):
        """Compare two snapshots or compare snapshot with current state.

        Parameters
        --
        a : str | dict | Graph
            First snapshot (label, snapshot dict, or another graph)
        b : str | dict | Graph, optional
            Second snapshot. If None, compare with the current state.

        Returns
        ---
        GraphDiff
            Difference object with added/removed/reweighted entities

        """
        snap_a = self._resolve_snapshot(a)
        snap_b = self._resolve_snapshot(b) if b is not None else self._state("current")
        return GraphDiff(snap_a, snap_b)

    def _resolve_snapshot(self, ref):
        """Resolve snapshot reference (label, dict, or graph)."""
        if isinstance(ref, dict):
            return ref
        elif isinstance(ref, str):
            for snap in self._snapshots:
                if snap["label"] == ref:
                    return snap
            raise ValueError(f"Snapshot '{ref}' not found")
        elif isinstance(ref, Snapshots):
            return ref._state("external")
        else:
            raise TypeError(f"Invalid snapshot reference: {type(ref)}")

    def list_snapshots(self):
        """List all snapshots.

        Returns
        ---
        list[dict]
            Snapshot metadata

        """
        return [
            {
                "label": snap["label"],
                "timestamp": snap["timestamp"],
                "version": snap["version"],
                "counts": dict(snap["counts"]),
            }
            for snap in self._snapshots
        ]
