"""Application layer: ports shared by adapters and the façade."""
