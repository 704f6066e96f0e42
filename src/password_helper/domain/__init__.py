"""Domain layer for password_helper."""
