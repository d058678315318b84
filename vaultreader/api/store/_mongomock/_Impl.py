"""Mock MongoDB store implementation using mongomock."""

from pymongo.collection import Collection

from .._AbstractImpl import _AbstractImpl
from .._collection_ops import _get, _keys, _remove, _set
from ..StoreConfig import StoreConfig
from . import _client
from ._Data import _Data


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig, database_name: str, collection_name: str):
        if not isinstance(store_config.data, _Data):
            raise ValueError("MongoMock config data is required")
        self.database_name = database_name
        self.collection_name = collection_name
        self._collection: Collection | None = None

    def __enter__(self):
        client = _client._get_mongomock_client()
        self._collection = client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Don't close shared client - it's reused across instances
        self._collection = None
        return False

    def get(self, key: str) -> str | None:
        return _get(self._collection, key)

    def set(self, key: str, text: str) -> None:
        _set(self._collection, key, text)

    def remove(self, key: str) -> None:
        _remove(self._collection, key)

    def keys(self, prefix: str = "") -> list[str]:
        return _keys(self._collection, prefix)
