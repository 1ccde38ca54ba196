"""Core domain: axis/level model, resolution and profile completion."""
