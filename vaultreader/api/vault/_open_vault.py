"""Open the configured vault (UNO: single function)."""

from .Vault import Vault


def _open_vault() -> Vault:
    """Build a (not yet entered) Vault from the config file.

    Raises:
        ValueError: If the configuration cannot be loaded.
    """
    from ..config.VaultReaderConfig import VaultReaderConfig

    config = VaultReaderConfig.load()
    return Vault(config.vault, config.store)
