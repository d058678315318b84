"""Exceptions raised by vault backends and path mutations."""


class VaultError(Exception):
    """Base class for all vault errors."""


class PermissionDenied(VaultError):
    """Native backend access was refused or revoked."""


class NotFound(VaultError):
    """No content or entry exists for the requested node."""


class NameCollision(VaultError):
    """A sibling already uses the requested name."""


class UnsupportedOperation(VaultError):
    """The backend has no primitive (and no fallback) for the operation."""


class IOFailure(VaultError):
    """Generic read/write/transport failure."""
