"""OutlineEntry model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OutlineEntry:
    """A heading of a document, with its generated anchor id."""

    level: int
    text: str
    anchor_id: str
