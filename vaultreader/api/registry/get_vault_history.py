"""Read the vault history (UNO: single function)."""

import json
import logging

from pydantic import ValidationError

from ..store.Store import Store
from ._constants import HISTORY_KEY
from .VaultRecord import VaultRecord

logger = logging.getLogger(__name__)


def get_vault_history(store: Store) -> list[VaultRecord]:
    """Return known vaults, most recently accessed first.

    Unreadable history is logged and treated as empty.
    """
    raw = store.get(HISTORY_KEY)
    if not raw:
        return []
    try:
        records = [VaultRecord.model_validate(item) for item in json.loads(raw)]
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.warning("Failed to read vault history: %s", e)
        return []
    return sorted(records, key=lambda record: record.last_accessed, reverse=True)
