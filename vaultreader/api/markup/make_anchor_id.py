"""Anchor id generator (UNO: single function)."""

import re

# CJK Unified Ideographs, including Extension A.
_CJK_RANGES = f"{chr(0x3400)}-{chr(0x4DBF)}{chr(0x4E00)}-{chr(0x9FFF)}"

# Runs of anything except letters, digits and CJK ideographs.
_SEPARATOR_PATTERN = re.compile(rf"(?:[^\w{_CJK_RANGES}]|_)+")

FALLBACK_ANCHOR = "heading"


def make_anchor_id(text: str) -> str:
    """Derive a URL-safe anchor id from plain heading text.

    Example:
        >>> make_anchor_id("Hello, World!")
        'hello-world'
    """
    anchor = _SEPARATOR_PATTERN.sub("-", text.lower()).strip("-")
    return anchor or FALLBACK_ANCHOR
