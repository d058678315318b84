"""Persisted store key derivation (UNO: single function)."""


def store_key(vault_id: str, path: str) -> str:
    """Key for the content of ``path`` inside vault ``vault_id``."""
    return f"content:{vault_id}:{path}"
