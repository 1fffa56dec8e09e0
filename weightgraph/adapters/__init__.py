"""weightgraph.adapters: conversions to and from third-party graph and table types."""
