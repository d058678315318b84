"""Configuration models."""

from .LogConfig import LogConfig
from .VaultReaderConfig import VaultReaderConfig

__all__ = ["LogConfig", "VaultReaderConfig"]
