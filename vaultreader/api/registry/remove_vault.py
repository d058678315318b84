"""Forget a vault (UNO: single function)."""

from ..store.Store import Store
from ._constants import MANIFEST_KEY_PREFIX
from .add_or_update_vault import _save_history
from .get_vault_history import get_vault_history
from .VaultRecord import VaultRecord


def remove_vault(store: Store, vault_id: str) -> list[VaultRecord]:
    """Drop ``vault_id`` from history together with its manifest snapshot."""
    history = [record for record in get_vault_history(store) if record.id != vault_id]
    _save_history(store, history)
    store.remove(f"{MANIFEST_KEY_PREFIX}{vault_id}")
    return history
