"""Inline markup stripper (UNO: single function)."""

import re

_SUBSTITUTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"!\[[^\]]*\]\([^)]*\)"), ""),  # images
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),  # links -> text
    (re.compile(r"(\*\*|__)(.*?)\1"), r"\2"),  # bold
    (re.compile(r"(\*|_)(.*?)\1"), r"\2"),  # italic
    (re.compile(r"`([^`]+)`"), r"\1"),  # inline code
    (re.compile(r"<!--.*?-->", re.DOTALL), ""),  # comments
]


def strip_markup(text: str) -> str:
    """Reduce heading text to plain text."""
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text.strip()
