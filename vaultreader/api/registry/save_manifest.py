"""Persist a vault tree snapshot (UNO: single function)."""

import json

from ..store.Store import Store
from ..tree.Node import Node
from ._constants import MANIFEST_KEY_PREFIX


def save_manifest(store: Store, vault_id: str, root: Node) -> None:
    """Store ``root`` in manifest form under ``vault_id``."""
    store.set(f"{MANIFEST_KEY_PREFIX}{vault_id}", json.dumps(root.to_manifest(), ensure_ascii=False))
