"""Output schemas for vault commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class VaultTreeOutput(BaseOutputSchema):
    """Output schema for vault tree command."""
    vault_id: str = Field(..., description="Identifier of the opened vault, empty string if it could not be opened")
    search: str = Field(..., description="Search term applied to the listing")
    tree: list[dict[str, Any]] = Field(..., description="Filtered nodes in manifest form")


class VaultReadOutput(BaseOutputSchema):
    """Output schema for vault read command."""
    vault_id: str = Field(..., description="Identifier of the opened vault")
    path: str = Field(..., description="Vault path that was read")
    content: str = Field(..., description="Resolved document content, empty string on error")


class VaultWriteOutput(BaseOutputSchema):
    """Output schema for vault write command."""
    vault_id: str = Field(..., description="Identifier of the opened vault")
    path: str = Field(..., description="Vault path that was written")
    length: int = Field(..., description="Number of characters written, 0 on error")


class VaultNewOutput(BaseOutputSchema):
    """Output schema for vault new command."""
    vault_id: str = Field(..., description="Identifier of the opened vault")
    path: str = Field(..., description="Path of the created node")
    kind: str = Field(..., description="Node kind: file or directory")


class VaultRmOutput(BaseOutputSchema):
    """Output schema for vault rm command."""
    vault_id: str = Field(..., description="Identifier of the opened vault")
    path: str = Field(..., description="Path of the deleted node")


class VaultMvOutput(BaseOutputSchema):
    """Output schema for vault mv command."""
    vault_id: str = Field(..., description="Identifier of the opened vault")
    path: str = Field(..., description="Original path of the node")
    new_path: str = Field(..., description="Path after the rename, empty string on error")


class VaultRenderOutput(BaseOutputSchema):
    """Output schema for vault render command."""
    vault_id: str = Field(..., description="Identifier of the opened vault")
    path: str = Field(..., description="Rendered document path")
    metadata: dict[str, Any] | None = Field(..., description="Parsed metadata block, null if the document has none")
    body: str = Field(..., description="Document body with references rewritten")
    outline: list[dict[str, Any]] = Field(..., description="Headings with level, text and anchor_id")
    references: list[dict[str, Any]] = Field(..., description="Rewritten wiki references")


class VaultResolveOutput(BaseOutputSchema):
    """Output schema for vault resolve command."""
    vault_id: str = Field(..., description="Identifier of the opened vault")
    target: str = Field(..., description="Reference target as given")
    is_embed: bool = Field(..., description="Whether filename matching applied as for embeds")
    status: str = Field(..., description="ok or missing_target")
    target_uri: str = Field(..., description="vault:/// URI of the resolved node")
    path: str | None = Field(..., description="Resolved node path, null if unresolved")
    candidates: list[str] = Field(..., description="Every matching path in resolution order")


register_output_schema("vault", "tree", VaultTreeOutput)
register_output_schema("vault", "read", VaultReadOutput)
register_output_schema("vault", "write", VaultWriteOutput)
register_output_schema("vault", "new", VaultNewOutput)
register_output_schema("vault", "rm", VaultRmOutput)
register_output_schema("vault", "mv", VaultMvOutput)
register_output_schema("vault", "render", VaultRenderOutput)
register_output_schema("vault", "resolve", VaultResolveOutput)
