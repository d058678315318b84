"""Vault configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..backend._native._Data import _Data as _NativeData
from ..backend._virtual._Data import _Data as _VirtualData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "native": _NativeData,
    "virtual": _VirtualData,
}


class VaultConfig(BaseModel):
    type: str = Field(..., description="Vault backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")
    hidden_paths: list[str] = Field(
        default_factory=list,
        description="Names or paths hidden from tree listings (e.g. an attachment folder)",
    )

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"vault config must be a dict, got {type(values).__name__}")
        values = dict(values)
        vault_type = values.get("type")
        if not vault_type:
            raise ValueError("vault.type is required")
        config_data_class = _BACKEND_REGISTRY.get(vault_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {vault_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            raise ValueError("vault.data is required")
        if isinstance(data, BaseModel):
            return values
        values["data"] = config_data_class(**data)
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
