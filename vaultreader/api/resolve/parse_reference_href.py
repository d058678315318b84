"""Reference href parser (UNO: single function)."""

from urllib.parse import unquote

from ..markup.NormalizedReference import EMBED_SCHEME, LINK_SCHEME


def parse_reference_href(href: str) -> tuple[bool, str] | None:
    """Decode a rewritten reference href into ``(is_embed, target)``.

    Returns None for hrefs that are not wiki references.
    """
    if href.startswith(LINK_SCHEME):
        return False, unquote(href[len(LINK_SCHEME) :])
    if href.startswith(EMBED_SCHEME):
        return True, unquote(href[len(EMBED_SCHEME) :])
    return None
