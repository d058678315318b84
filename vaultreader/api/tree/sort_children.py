"""Sibling ordering (UNO: single function)."""

import unicodedata

from .Node import Node
from .NodeKind import NodeKind


def _base_letters(name: str) -> str:
    decomposed = unicodedata.normalize("NFKD", name.casefold())
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def sibling_sort_key(node: Node) -> tuple[int, str, str, str]:
    """Directories first, then by name ignoring case and accents.

    Ties fall back to accents, then case with lowercase first.
    """
    return (
        0 if node.kind is NodeKind.DIRECTORY else 1,
        _base_letters(node.name),
        node.name.casefold(),
        node.name.swapcase(),
    )


def sort_children(children: list[Node]) -> None:
    """Sort a sibling sequence in place."""
    children.sort(key=sibling_sort_key)
