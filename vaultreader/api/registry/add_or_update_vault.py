"""Record a vault access (UNO: single function)."""

import json
import time

from ..store.Store import Store
from ._constants import HISTORY_KEY
from .get_vault_history import get_vault_history
from .VaultRecord import VaultRecord


def _save_history(store: Store, history: list[VaultRecord]) -> None:
    store.set(HISTORY_KEY, json.dumps([record.model_dump() for record in history]))


def add_or_update_vault(store: Store, vault_id: str, name: str, vault_type: str) -> list[VaultRecord]:
    """Insert or refresh the record for ``vault_id`` and stamp its access time."""
    history = [record for record in get_vault_history(store) if record.id != vault_id]
    history.insert(0, VaultRecord(id=vault_id, name=name, type=vault_type, last_accessed=time.time()))  # type: ignore[arg-type]
    history.sort(key=lambda record: record.last_accessed, reverse=True)
    _save_history(store, history)
    return history
