"""Vault error taxonomy."""

from .VaultError import IOFailure, NameCollision, NotFound, PermissionDenied, UnsupportedOperation, VaultError

__all__ = [
    "IOFailure",
    "NameCollision",
    "NotFound",
    "PermissionDenied",
    "UnsupportedOperation",
    "VaultError",
]
