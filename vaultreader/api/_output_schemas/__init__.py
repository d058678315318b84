"""Output schemas for API commands.

Importing this package registers every schema.
"""

from . import history, vault
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "history", "register_output_schema", "vault"]
