"""Native backend configuration data."""

from pydantic import BaseModel, Field, field_validator


class _Data(BaseModel):
    model_config = {"extra": "forbid"}

    base_dir: str = Field(..., description="Path to vault root directory")
    rename_primitive: bool = Field(
        default=True,
        description="Whether the platform offers a native rename; when false files are copied and directories cannot be renamed",
    )

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("vault.data.base_dir is required")
        from ....utils.expand_path import expand_path

        return str(expand_path(v))
