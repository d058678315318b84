"""Vault session API and commands."""

from .Vault import Vault
from .VaultConfig import VaultConfig

__all__ = ["Vault", "VaultConfig"]
