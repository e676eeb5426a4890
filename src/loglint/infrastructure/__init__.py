"""Infrastructure layer: source hosts."""
