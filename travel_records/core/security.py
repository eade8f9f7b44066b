"""Password hashing helpers.

Hashes are deterministic so a login can be resolved with an equality query
on (username, password hash).
"""
import hashlib


def hash_password(password: str) -> str:
    """Return the hex SHA-256 digest of a password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()
