"""Leading metadata block parser (UNO: single function)."""

import re
from typing import Any

from .parse_metadata_value import parse_metadata_value

METADATA_BLOCK_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def parse_metadata(text: str) -> tuple[dict[str, Any] | None, str]:
    """Split a leading ``---`` metadata block from the document.

    Top-level ``key: value`` lines set entries. A top-level ``key:`` with no
    value opens a mapping that the following indented ``key: value`` lines
    fill; deeper indentation is not tracked separately. Blank lines and
    lines starting with ``#`` are skipped.

    Returns:
        ``(metadata, body)``. Without a metadata block, metadata is None and
        the text is returned unchanged; otherwise the body is stripped.
    """
    match = METADATA_BLOCK_PATTERN.match(text)
    if not match:
        return None, text

    metadata: dict[str, Any] = {}
    current: dict[str, Any] | None = None

    for line in match.group(1).splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, value = stripped.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()

        if not line[0].isspace():
            if value:
                current = None
                metadata[key] = parse_metadata_value(value)
            else:
                current = {}
                metadata[key] = current
        elif current is not None:
            current[key] = parse_metadata_value(value)

    return metadata, text[match.end() :].strip()
