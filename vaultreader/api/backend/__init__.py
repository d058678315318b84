"""Vault storage backends."""

from ._AbstractBackend import _AbstractBackend

__all__ = ["_AbstractBackend"]
