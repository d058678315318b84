"""Load a vault tree snapshot (UNO: single function)."""

import json
import logging
from typing import Any

from ..store.Store import Store
from ._constants import MANIFEST_KEY_PREFIX

logger = logging.getLogger(__name__)


def get_manifest(store: Store, vault_id: str) -> dict[str, Any] | None:
    """Return the saved manifest for ``vault_id``, or None if absent or unreadable."""
    raw = store.get(f"{MANIFEST_KEY_PREFIX}{vault_id}")
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring unreadable manifest for %s: %s", vault_id, e)
        return None
