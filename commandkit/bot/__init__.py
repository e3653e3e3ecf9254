"""Client construction and startup wiring."""
