"""Reference resolution against the vault tree."""

from .parse_reference_href import parse_reference_href
from .ReferenceResolver import ReferenceResolver
from .ResolvedReference import ResolvedReference

__all__ = ["ReferenceResolver", "ResolvedReference", "parse_reference_href"]
