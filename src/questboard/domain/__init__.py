"""Domain models and pure progress logic."""
