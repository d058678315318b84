"""Store configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData

# Registry: add new backends here (ONLY place store types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "mongo": _MongoData,
    "mongomock": _MongomockData,
}


class StoreConfig(BaseModel):
    type: str = Field(..., description="Store backend type")
    prefix: str = Field("vaultreader", description="Database name holding the store collection")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"store config must be a dict, got {type(values).__name__}")
        values = dict(values)
        store_type = values.get("type")
        if not store_type:
            raise ValueError("store.type is required")
        config_data_class = _BACKEND_REGISTRY.get(store_type)
        if not config_data_class:
            raise ValueError(f"Unknown store type: {store_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data", {})
        if isinstance(data, BaseModel):
            return values
        # Allow empty dict - backend config classes can have defaults
        values["data"] = config_data_class(**data)
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
