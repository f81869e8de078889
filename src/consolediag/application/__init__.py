"""Application layer: rendering, reporting and message resolution."""
