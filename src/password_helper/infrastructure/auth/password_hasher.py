"""Argon2 adapter behind PasswordService.hash, verify, needs_rehash and get_info.

The policy engine never hashes anything itself; argon2-cffi does. This module
turns argon2's exceptions into boolean results and reports hash parameters
in a plain dict so callers can decide when stored hashes are out of date.
"""

from typing import Any

from argon2 import PasswordHasher, extract_parameters
from argon2.exceptions import InvalidHashError, VerificationError

# Argon2id with library defaults
_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Return an encoded Argon2id hash (``$argon2id$...``) of a password.

    A fresh random salt is drawn on every call, so hashing the same
    password twice gives two different strings.
    """
    return _hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against an encoded hash.

    Mismatches and hashes argon2 cannot parse both give False; neither
    raises.
    """
    try:
        return _hasher.verify(hashed, password)
    except (VerificationError, InvalidHashError):
        return False


def needs_rehash(hashed: str) -> bool:
    """Whether a stored hash was made with parameters other than the current ones."""
    return _hasher.check_needs_rehash(hashed)


def get_hash_info(hashed: str) -> dict[str, Any]:
    """Describe the algorithm and parameters of a hash.

    Args:
        hashed: The hashed password to inspect.

    Returns:
        Dict with ``algo_name`` and ``options`` (time cost, memory cost,
        parallelism, hash length, salt length, version).

    Raises:
        argon2.exceptions.InvalidHashError: If the hash cannot be parsed.
    """
    params = extract_parameters(hashed)
    return {
        "algo_name": f"argon2{params.type.name.lower()}",
        "options": {
            "time_cost": params.time_cost,
            "memory_cost": params.memory_cost,
            "parallelism": params.parallelism,
            "hash_len": params.hash_len,
            "salt_len": params.salt_len,
            "version": params.version,
        },
    }
