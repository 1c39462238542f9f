"""Application layer: repository ports."""
