"""Client event handler registration."""
