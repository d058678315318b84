"""Wiki reference rewriter (UNO: single function)."""

import re

from .NormalizedReference import NormalizedReference

WIKILINK_PATTERN = re.compile(r"(!)?\[\[([^\]]+)\]\]")


def rewrite_references(body: str) -> tuple[str, list[NormalizedReference]]:
    """Replace every ``[[...]]`` / ``![[...]]`` with a standard markdown link or image.

    Returns:
        The rewritten body and the references in document order.
    """
    references: list[NormalizedReference] = []

    def _replace(match: re.Match[str]) -> str:
        target, alias = NormalizedReference.split_alias(match.group(2))
        reference = NormalizedReference(
            is_embed=bool(match.group(1)),
            target=target,
            display_text=alias or target,
        )
        references.append(reference)
        return reference.to_markdown()

    return WIKILINK_PATTERN.sub(_replace, body), references
