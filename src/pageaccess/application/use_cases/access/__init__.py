"""Access-override use cases."""
