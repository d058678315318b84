"""MongoDB store implementation."""

from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ...errors import IOFailure
from .._AbstractImpl import _AbstractImpl
from .._collection_ops import _get, _keys, _remove, _set
from ..StoreConfig import StoreConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig, database_name: str, collection_name: str):
        if not isinstance(store_config.data, _Data):
            raise ValueError("MongoDB config data is required")
        self.uri = store_config.data.uri
        self.database_name = database_name
        self.collection_name = collection_name
        self._client: MongoClient[Any] | None = None
        self._collection: Collection | None = None

    def __enter__(self):
        try:
            self._client = MongoClient(self.uri, serverSelectionTimeoutMS=5000)
            self._client.server_info()  # Test connection
        except PyMongoError as e:
            raise IOFailure(f"Cannot connect to store at {self.uri}: {e}") from e
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            self._client.close()
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
