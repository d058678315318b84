"""Output schemas for history commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class HistoryListOutput(BaseOutputSchema):
    """Output schema for history list command."""
    vaults: list[dict[str, Any]] = Field(..., description="Known vaults, most recently accessed first")


class HistoryForgetOutput(BaseOutputSchema):
    """Output schema for history forget command."""
    vault_id: str = Field(..., description="Identifier of the vault to forget")
    removed: bool = Field(..., description="Whether the vault was in the history")


register_output_schema("history", "list", HistoryListOutput)
register_output_schema("history", "forget", HistoryForgetOutput)
