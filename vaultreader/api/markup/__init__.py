"""Markup pre-processing: metadata, comments, wiki references and outline."""

from .extract_outline import extract_outline
from .make_anchor_id import make_anchor_id
from .NormalizedReference import EMBED_SCHEME, LINK_SCHEME, NormalizedReference
from .OutlineEntry import OutlineEntry
from .parse_metadata import parse_metadata
from .parse_metadata_value import parse_metadata_value
from .process_markup import ProcessedDocument, process_markup
from .rewrite_references import rewrite_references
from .strip_comments import strip_comments
from .strip_markup import strip_markup

__all__ = [
    "EMBED_SCHEME",
    "LINK_SCHEME",
    "NormalizedReference",
    "OutlineEntry",
    "ProcessedDocument",
    "extract_outline",
    "make_anchor_id",
    "parse_metadata",
    "parse_metadata_value",
    "process_markup",
    "rewrite_references",
    "strip_comments",
    "strip_markup",
]
