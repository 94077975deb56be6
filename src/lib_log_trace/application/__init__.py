"""Application layer: ports and use cases of the trace renderer."""
