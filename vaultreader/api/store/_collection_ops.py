"""Key-value operations over a pymongo-compatible collection."""

import re
from typing import Any

from pymongo.errors import PyMongoError

from ..errors import IOFailure


def _get(collection: Any, key: str) -> str | None:
    try:
        doc = collection.find_one({"_id": key}, {"value": 1})
    except PyMongoError as e:
        raise IOFailure(f"Store read failed for {key!r}: {e}") from e
    return None if doc is None else doc.get("value")


def _set(collection: Any, key: str, text: str) -> None:
    try:
        collection.update_one({"_id": key}, {"$set": {"value": text}}, upsert=True)
    except PyMongoError as e:
        raise IOFailure(f"Store write failed for {key!r}: {e}") from e


def _remove(collection: Any, key: str) -> None:
    try:
        collection.delete_one({"_id": key})
    except PyMongoError as e:
        raise IOFailure(f"Store delete failed for {key!r}: {e}") from e


def _keys(collection: Any, prefix: str) -> list[str]:
    query = {"_id": {"$regex": f"^{re.escape(prefix)}"}} if prefix else {}
    try:
        return sorted(doc["_id"] for doc in collection.find(query, {"_id": 1}))
    except PyMongoError as e:
        raise IOFailure(f"Store listing failed for prefix {prefix!r}: {e}") from e
