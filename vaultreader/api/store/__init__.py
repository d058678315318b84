"""Persisted key-value store."""

from .Store import Store
from .store_key import store_key
from .StoreConfig import StoreConfig

__all__ = ["Store", "StoreConfig", "store_key"]
