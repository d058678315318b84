"""Virtual backend configuration data."""

from pydantic import BaseModel, Field


class _Data(BaseModel):
    model_config = {"extra": "forbid"}

    vault_id: str = Field(default="mock-demo", description="Identifier used to key persisted content")
    manifest: str | None = Field(default=None, description="Path to a bootstrap manifest JSON file")
    origin_dir: str | None = Field(default=None, description="Directory holding bundled default contents")
