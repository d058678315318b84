"""Persisted key-value store public API."""

from typing import Any

from ._AbstractImpl import _AbstractImpl
from .StoreConfig import StoreConfig

COLLECTION_NAME = "store"


class Store:
    """Persisted text store keyed by string.

    Delegates to a concrete implementation based on configuration.
    Acts as a Context Manager to ensure proper resource handling.
    """

    def __init__(self, store_config: StoreConfig):
        self.store_config = store_config
        self.prefix = store_config.prefix
        self._impl: _AbstractImpl | None = None

    def __enter__(self) -> "Store":
        from .StoreConfig import _BACKEND_REGISTRY

        backend_type = self.store_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported store type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import store implementation class directly from backend _Impl module
        module = __import__(f"vaultreader.api.store._{backend_type}._Impl", fromlist=[""])
        self._impl = module._Impl(self.store_config, self.prefix, COLLECTION_NAME)
        self._impl.__enter__()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        if self._impl:
            self._impl.__exit__(exc_type, exc_val, exc_tb)
        self._impl = None
        return False

    @property
    def impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Store not initialized (use 'with Store(...)')")
        return self._impl

    def get(self, key: str) -> str | None:
        return self.impl.get(key)

    def set(self, key: str, text: str) -> None:
        self.impl.set(key, text)

    def remove(self, key: str) -> None:
        self.impl.remove(key)

    def keys(self, prefix: str = "") -> list[str]:
        return self.impl.keys(prefix)
