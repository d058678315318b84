"""MongoDB-specific store configuration data."""

from pydantic import BaseModel, Field, model_validator


class _Data(BaseModel):
    uri: str = Field(
        ...,
        description="MongoDB connection URI (required).",
    )

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_fields(self) -> "_Data":
        if not self.uri.startswith("mongodb"):
            raise ValueError(f"store.uri must start with 'mongodb://' (found: {self.uri!r})")
        return self
