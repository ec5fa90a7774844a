"""Application layer: domain errors and use case services."""
