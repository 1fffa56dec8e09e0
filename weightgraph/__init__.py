# weightgraph/__init__.py
"""weightgraph: directed, positively weighted graph ADT with two representations."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "weightgraph.core",
    "adapters": "weightgraph.adapters",
    "networkx": "weightgraph.adapters.networkx_adapter",
    "dataframe": "weightgraph.adapters.dataframe_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("weightgraph.core.graph", "Graph"),
    "EdgeListGraph": ("weightgraph.core.edge_list", "EdgeListGraph"),
    "VertexListGraph": ("weightgraph.core.vertex_list", "VertexListGraph"),
    "Edge": ("weightgraph.core.edge", "Edge"),
    "Vertex": ("weightgraph.core.vertex", "Vertex"),
    "GraphDiff": ("weightgraph.core._GraphDiff", "GraphDiff"),
    "empty_graph": ("weightgraph.core.graph", "empty_graph"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("weightgraph.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("weightgraph.adapters.networkx_adapter", "from_nx"),
    # DataFrames (narwhals-backed)
    "to_dataframe": ("weightgraph.adapters.dataframe_adapter", "to_dataframe"),
    "from_dataframe": ("weightgraph.adapters.dataframe_adapter", "from_dataframe"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("weightgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
