"""Infrastructure: cache backend and cached repositories."""
