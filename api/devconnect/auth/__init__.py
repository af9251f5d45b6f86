"""Authentication utilities for the DevConnect API."""

from devconnect.auth.jwt import create_access_token, decode_token
from devconnect.auth.password import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
]
