"""Domain layer: albums, shared value objects and the error taxonomy."""
