"""Identity application layer: sign-in and current-user resolution."""
