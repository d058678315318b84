"""Tree filtering for listings (UNO: single function)."""

from dataclasses import replace

from .Node import Node
from .NodeKind import NodeKind


def filter_tree(nodes: list[Node], search: str = "", hidden_paths: list[str] | None = None) -> list[Node]:
    """Filter a sibling list by hidden entries and a substring search.

    A node is hidden when its name or path equals an entry of ``hidden_paths``.
    With a search term, files are kept when their name contains it
    (case-insensitive) and directories are kept when their name matches or
    any descendant survives. Returned nodes are shallow copies, so the live
    tree is never modified.
    """
    hidden = set(hidden_paths or [])
    needle = search.lower()
    result: list[Node] = []

    for node in nodes:
        if node.name in hidden or node.path in hidden:
            continue

        if node.kind is NodeKind.FILE:
            if not needle or needle in node.name.lower():
                result.append(node)
            continue

        children = filter_tree(node.children or [], search, hidden_paths)
        if not needle or needle in node.name.lower() or children:
            result.append(replace(node, children=children))

    return result
