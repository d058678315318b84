"""VaultRecord model (UNO: single model)."""

from typing import Literal

from pydantic import BaseModel, Field


class VaultRecord(BaseModel):
    """A vault the user has opened before."""

    id: str = Field(..., description="Vault identifier")
    name: str = Field(..., description="Display name (root directory name)")
    type: Literal["native", "virtual"] = Field(..., description="Backend the vault is bound to")
    last_accessed: float = Field(0.0, description="Unix timestamp of the last open")
