"""Vault history and manifest snapshots."""

from .add_or_update_vault import add_or_update_vault
from .get_manifest import get_manifest
from .get_vault_history import get_vault_history
from .remove_vault import remove_vault
from .save_manifest import save_manifest
from .VaultRecord import VaultRecord

__all__ = [
    "VaultRecord",
    "add_or_update_vault",
    "get_manifest",
    "get_vault_history",
    "remove_vault",
    "save_manifest",
]
