"""Markup pre-processor (UNO: single function)."""

from dataclasses import dataclass, field
from typing import Any

from .extract_outline import extract_outline
from .NormalizedReference import NormalizedReference
from .OutlineEntry import OutlineEntry
from .parse_metadata import parse_metadata
from .rewrite_references import rewrite_references
from .strip_comments import strip_comments


@dataclass
class ProcessedDocument:
    """Derived view of a document; recomputed on every load, never persisted."""

    metadata: dict[str, Any] | None
    body: str
    outline: list[OutlineEntry] = field(default_factory=list)
    references: list[NormalizedReference] = field(default_factory=list)


def process_markup(text: str) -> ProcessedDocument:
    """Strip comments, split metadata, rewrite wiki references and build the outline."""
    metadata, body = parse_metadata(strip_comments(text))
    body, references = rewrite_references(body)
    return ProcessedDocument(
        metadata=metadata,
        body=body,
        outline=extract_outline(body),
        references=references,
    )
