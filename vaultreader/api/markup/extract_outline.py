"""Outline extractor (UNO: single function)."""

import re

from .make_anchor_id import make_anchor_id
from .OutlineEntry import OutlineEntry
from .strip_markup import strip_markup

HEADING_PATTERN = re.compile(r"^(#{1,4})[ \t]+(.+)$", re.MULTILINE)


def extract_outline(body: str) -> list[OutlineEntry]:
    """List level 1-4 headings in document order.

    Identical heading texts yield identical anchor ids; no deduplication.
    """
    outline: list[OutlineEntry] = []
    for match in HEADING_PATTERN.finditer(body):
        text = strip_markup(match.group(2).strip())
        outline.append(OutlineEntry(level=len(match.group(1)), text=text, anchor_id=make_anchor_id(text)))
    return outline
