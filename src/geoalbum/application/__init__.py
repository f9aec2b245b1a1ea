"""Application layer: album use cases."""
