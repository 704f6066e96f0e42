"""Authentication infrastructure components.

This module provides the Argon2 password hashing adapter.
"""

from password_helper.infrastructure.auth.password_hasher import (
    get_hash_info,
    hash_password,
    needs_rehash,
    verify_password,
)

__all__ = [
    "get_hash_info",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
