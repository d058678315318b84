"""Store keys used by the vault registry (private)."""

HISTORY_KEY = "registry:vaults"
MANIFEST_KEY_PREFIX = "manifest:"
