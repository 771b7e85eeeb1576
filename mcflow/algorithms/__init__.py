"""Flow algorithms operating on :class:`mcflow.graph.residual.ResidualGraph`."""
