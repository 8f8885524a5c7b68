"""Infrastructure layer - record store and HTTP clients."""
