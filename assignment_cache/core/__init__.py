"""Core: configuration, constants and lifespan wiring."""
