"""Infrastructure adapters for password_helper."""
