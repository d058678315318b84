"""Comment stripper (UNO: single function)."""

import re

COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)


def strip_comments(text: str) -> str:
    """Remove every ``<!-- ... -->`` span, including multi-line ones."""
    return COMMENT_PATTERN.sub("", text)
